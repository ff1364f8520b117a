"""
Database connection manager for SQLite.

Provides:
- Async SQLite connection management using aiosqlite
- Concurrent access protection via transaction-scoped locks
- Transaction support with automatic commit/rollback
- Schema initialization and optional seed data
"""

import asyncio
import logging
import warnings
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import aiosqlite

from .schema import SCHEMA_SQL, SEED_SQL

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Manages SQLite database connections with async support.

    Features:
    - Lazy initialization
    - Single shared connection with transaction-level locking
    - Schema auto-initialization
    - Transaction management with automatic commit/rollback

    Note: The lock exists only because one aiosqlite connection is shared by
    every request: BEGIN/COMMIT from two coroutines must not interleave on it.
    It guards a single repository call and nothing more. There is no
    application-level locking of entities or multi-call sequences, so
    concurrent read-then-write updates of the same row are last-write-wins.
    """

    def __init__(self, db_path: Path):
        """
        Initialize database manager.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self._connection: Optional[aiosqlite.Connection] = None
        self._initialized = False

        # Prevent multi-statement transaction interleaving on shared connection
        self._lock = asyncio.Lock()

        # Prevent concurrent init() calls
        self._init_lock = asyncio.Lock()

        # Track active transaction owner to prevent interleaving/reentrancy
        self._transaction_owner: Optional[asyncio.Task] = None

    async def init(self, seed: bool = False):
        """
        Initialize database connection and schema.

        - Creates database file if not exists
        - Executes schema SQL (idempotent via CREATE IF NOT EXISTS)
        - Inserts starter categories/tasks when `seed` is set

        Safe to call more than once; only the first call does any work.
        """
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:
                return

            try:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)

                self._connection = await aiosqlite.connect(
                    str(self.db_path),
                    timeout=5.0,
                )

                # Enable row factory for dict-like access
                self._connection.row_factory = aiosqlite.Row

                await self._connection.executescript(SCHEMA_SQL)
                if seed:
                    await self._connection.executescript(SEED_SQL)
                    logger.info("Seed data applied")
                await self._connection.commit()

                self._initialized = True

            except Exception:
                # Cleanup on failure to prevent connection leak
                if self._connection:
                    await self._connection.close()
                    self._connection = None
                raise

    async def close(self):
        """
        Close database connection.

        Acquires the lock so no transaction is cut off mid-flight.
        """
        async with self._lock:
            if self._connection:
                await self._connection.close()
                self._connection = None
                self._initialized = False

    @property
    def connection(self) -> aiosqlite.Connection:
        """
        Get the active connection.

        Raises:
            RuntimeError: If database not initialized
        """
        if not self._initialized or not self._connection:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self._connection

    def _warn_outside_transaction(self, operation: str, reason: str) -> None:
        message = (
            f"{operation} called outside of transaction(): {reason}. "
            "Use 'async with db.transaction()' to ensure isolation."
        )
        warnings.warn(message, RuntimeWarning, stacklevel=3)
        logger.warning(message)

    def _require_transaction(self, operation: str) -> None:
        current_task = asyncio.current_task()
        owner = self._transaction_owner
        if owner is None:
            self._warn_outside_transaction(operation, "no active transaction")
            raise RuntimeError(
                f"{operation} requires an active transaction. "
                "Use 'async with db.transaction()'."
            )
        if owner is not current_task:
            self._warn_outside_transaction(
                operation, "transaction owned by a different task"
            )
            raise RuntimeError(
                f"{operation} must run within the current task's transaction. "
                "Use 'async with db.transaction()' in this task."
            )

    async def execute(self, sql: str, parameters=None) -> aiosqlite.Cursor:
        """
        Execute a single SQL statement.

        Args:
            sql: SQL statement
            parameters: Query parameters (tuple or dict)

        Returns:
            Cursor object
        """
        self._require_transaction("execute")
        return await self.connection.execute(sql, parameters or ())

    async def fetch_one(self, sql: str, parameters=None) -> Optional[aiosqlite.Row]:
        """Execute query and fetch one row (None if no match)."""
        self._require_transaction("fetch_one")
        cursor = await self.execute(sql, parameters)
        try:
            return await cursor.fetchone()
        finally:
            await cursor.close()

    async def fetch_all(self, sql: str, parameters=None) -> list[aiosqlite.Row]:
        """Execute query and fetch all rows."""
        self._require_transaction("fetch_all")
        cursor = await self.execute(sql, parameters)
        try:
            return await cursor.fetchall()
        finally:
            await cursor.close()

    async def commit(self):
        """Commit current transaction."""
        await self.connection.commit()

    async def rollback(self):
        """Rollback current transaction."""
        await self.connection.rollback()

    @asynccontextmanager
    async def transaction(self):
        """
        Async context manager for transactions with locking.

        Usage:
            async with db.transaction():
                await db.execute("INSERT INTO ...")
                await db.execute("UPDATE ...")
                # Auto-commits on success, rolls back on exception

        **IMPORTANT**: Do NOT nest transactions. asyncio.Lock is not reentrant.
        Repository methods should not call other repository methods directly.
        """
        current_task = asyncio.current_task()
        if self._transaction_owner is current_task:
            self._warn_outside_transaction(
                "transaction()", "nested transaction in the same task"
            )
            raise RuntimeError("Nested transaction() is not allowed.")

        async with self._lock:
            if self._transaction_owner is not None:
                self._warn_outside_transaction(
                    "transaction()", "transaction already active in another task"
                )
                raise RuntimeError("Another transaction is already active.")
            self._transaction_owner = current_task
            try:
                await self.connection.execute("BEGIN TRANSACTION")
                try:
                    yield self
                except BaseException:
                    # CancelledError included
                    await self.rollback()
                    raise
                else:
                    await self.commit()
            finally:
                self._transaction_owner = None

    async def ping(self) -> bool:
        """Check that the database answers a trivial query."""
        async with self.transaction():
            row = await self.fetch_one("SELECT 1 AS ok")
        return row is not None and row["ok"] == 1

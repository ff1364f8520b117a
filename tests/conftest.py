"""
Shared fixtures: temporary SQLite databases and a TestClient per test.
"""

import asyncio
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from backend.src.db import CategoryRepository, DatabaseManager, TodoTaskRepository
from backend.src.services import Mediator, Repositories
from backend.src.web.config import AppConfig
from backend.src.web.main import create_app


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "todo_tasks.db"


@pytest.fixture
def run_db(db_path):
    """
    Run `fn(db)` against a fresh, initialized database inside asyncio.run.

    Usage:
        result = run_db(some_coroutine_function)
    """

    def runner(fn, seed: bool = False):
        async def main():
            db = DatabaseManager(db_path)
            await db.init(seed=seed)
            try:
                return await fn(db)
            finally:
                await db.close()

        return asyncio.run(main())

    return runner


@pytest.fixture
def run_mediator(run_db):
    """Like run_db, but hands `fn` a Mediator wired to the database."""

    def runner(fn, seed: bool = False):
        async def with_mediator(db):
            repos = Repositories(
                tasks=TodoTaskRepository(db),
                categories=CategoryRepository(db),
            )
            return await fn(Mediator(repos))

        return run_db(with_mediator, seed=seed)

    return runner


def make_config(db_path: Path, **overrides) -> AppConfig:
    values = dict(
        database_path=db_path,
        seed_data=False,
        rate_limit_enabled=False,
        cors_origins=["*"],
        log_level="WARNING",
    )
    values.update(overrides)
    return AppConfig(**values)


@pytest.fixture
def client(db_path):
    with TestClient(create_app(make_config(db_path))) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(db_path):
    with TestClient(create_app(make_config(db_path, seed_data=True))) as test_client:
        yield test_client

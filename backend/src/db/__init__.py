"""
Database module for todo task persistence.

Provides SQLite-based storage for:
- Categories
- Todo tasks (with their category loaded on read)

Usage:
    from backend.src.db import DatabaseManager, TodoTaskRepository

    db = DatabaseManager(Path("data/todo_tasks.db"))
    await db.init()

    tasks = TodoTaskRepository(db)
    page = await tasks.get_paged(PaginationRequest(page_number=1, page_size=20))
"""

from .connection import DatabaseManager
from .crud import CategoryRepository, TodoTaskRepository
from .schema import CategoryRecord, TodoTaskRecord

__all__ = [
    # Connection
    "DatabaseManager",
    # Repositories
    "CategoryRepository",
    "TodoTaskRepository",
    # Records
    "CategoryRecord",
    "TodoTaskRecord",
]

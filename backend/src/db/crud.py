"""
CRUD operations for todo task persistence.

Provides:
- CategoryRepository for category rows
- TodoTaskRepository for task rows, loading the referenced category on reads

Every method is a single transaction on one entity; there is no batch or
multi-entity write.
"""

from typing import Dict, Iterable, List, Optional

from ..domain import Category, PagedResult, PaginationRequest, TodoTask
from .connection import DatabaseManager
from .schema import CategoryRecord, TodoTaskRecord, format_iso8601


class CategoryRepository:
    """
    Repository for category persistence operations.
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialize repository.

        Args:
            db: DatabaseManager instance
        """
        self.db = db

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        """
        Get category by ID.

        Returns:
            Category entity, or None if not found
        """
        async with self.db.transaction():
            row = await self.db.fetch_one(
                "SELECT * FROM categories WHERE id = ?",
                (category_id,),
            )
        return CategoryRecord.model_validate(dict(row)).to_entity() if row else None

    async def get_paged(self, request: PaginationRequest) -> PagedResult[Category]:
        """
        Get one page of categories ordered by id.

        Args:
            request: Page number and size

        Returns:
            PagedResult with the window and the total category count
        """
        async with self.db.transaction():
            total_row = await self.db.fetch_one("SELECT COUNT(*) AS total FROM categories")
            rows = await self.db.fetch_all(
                """
                SELECT * FROM categories
                ORDER BY id
                LIMIT ? OFFSET ?
                """,
                (request.limit, request.offset),
            )

        return PagedResult[Category](
            items=[CategoryRecord.model_validate(dict(row)).to_entity() for row in rows],
            total_count=int(total_row["total"]),
            page_number=request.page_number,
            page_size=request.page_size,
        )

    async def add(self, category: Category) -> Category:
        """
        Insert a new category and assign its generated ID.

        Returns:
            The same entity, now with `id` set
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                """
                INSERT INTO categories (name, description, color, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    category.name,
                    category.description,
                    int(category.color) if category.color is not None else None,
                    format_iso8601(category.created_at),
                    format_iso8601(category.updated_at),
                ),
            )
            category.id = cursor.lastrowid
        return category

    async def update(self, category: Category):
        """Persist all mutable fields of an existing category."""
        async with self.db.transaction():
            await self.db.execute(
                """
                UPDATE categories
                SET name = ?, description = ?, color = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    category.name,
                    category.description,
                    int(category.color) if category.color is not None else None,
                    format_iso8601(category.updated_at),
                    category.id,
                ),
            )

    async def delete(self, category_id: int):
        """Delete category (no-op when it does not exist)."""
        async with self.db.transaction():
            await self.db.execute("DELETE FROM categories WHERE id = ?", (category_id,))

    async def exists(self, category_id: int) -> bool:
        """Check whether a category with this ID exists."""
        async with self.db.transaction():
            row = await self.db.fetch_one(
                "SELECT 1 FROM categories WHERE id = ?",
                (category_id,),
            )
        return row is not None


class TodoTaskRepository:
    """
    Repository for todo task persistence operations.

    Reads attach the referenced Category to `TodoTask.category`; a task whose
    category_id points nowhere (0 or deleted) gets None.
    """

    def __init__(self, db: DatabaseManager):
        """
        Initialize repository.

        Args:
            db: DatabaseManager instance
        """
        self.db = db

    async def _load_categories(self, category_ids: Iterable[int]) -> Dict[int, Category]:
        """Fetch categories by ID. Must run inside the caller's transaction."""
        ids = sorted({cid for cid in category_ids if cid > 0})
        if not ids:
            return {}

        placeholders = ", ".join("?" for _ in ids)
        rows = await self.db.fetch_all(
            f"SELECT * FROM categories WHERE id IN ({placeholders})",
            tuple(ids),
        )
        categories = [CategoryRecord.model_validate(dict(row)).to_entity() for row in rows]
        return {c.id: c for c in categories}

    async def _rows_to_tasks(self, rows) -> List[TodoTask]:
        records = [TodoTaskRecord.model_validate(dict(row)) for row in rows]
        categories = await self._load_categories(r.category_id for r in records)
        return [r.to_entity(categories.get(r.category_id)) for r in records]

    async def get_by_id(self, task_id: int) -> Optional[TodoTask]:
        """
        Get task by ID with its category.

        Returns:
            TodoTask entity, or None if not found
        """
        async with self.db.transaction():
            row = await self.db.fetch_one(
                "SELECT * FROM todo_tasks WHERE id = ?",
                (task_id,),
            )
            if not row:
                return None
            tasks = await self._rows_to_tasks([row])
        return tasks[0]

    async def get_paged(self, request: PaginationRequest) -> PagedResult[TodoTask]:
        """
        Get one page of tasks ordered by id.

        Args:
            request: Page number and size

        Returns:
            PagedResult with the window and the total task count
        """
        async with self.db.transaction():
            total_row = await self.db.fetch_one("SELECT COUNT(*) AS total FROM todo_tasks")
            rows = await self.db.fetch_all(
                """
                SELECT * FROM todo_tasks
                ORDER BY id
                LIMIT ? OFFSET ?
                """,
                (request.limit, request.offset),
            )
            items = await self._rows_to_tasks(rows)

        return PagedResult[TodoTask](
            items=items,
            total_count=int(total_row["total"]),
            page_number=request.page_number,
            page_size=request.page_size,
        )

    async def get_by_category(self, category_id: int) -> List[TodoTask]:
        """Get all tasks in a category, ordered by id."""
        async with self.db.transaction():
            rows = await self.db.fetch_all(
                """
                SELECT * FROM todo_tasks
                WHERE category_id = ?
                ORDER BY id
                """,
                (category_id,),
            )
            return await self._rows_to_tasks(rows)

    async def get_by_assigned_to(self, assigned_to: int) -> List[TodoTask]:
        """Get all tasks assigned to one user, ordered by id."""
        async with self.db.transaction():
            rows = await self.db.fetch_all(
                """
                SELECT * FROM todo_tasks
                WHERE assigned_to = ?
                ORDER BY id
                """,
                (assigned_to,),
            )
            return await self._rows_to_tasks(rows)

    async def add(self, task: TodoTask) -> TodoTask:
        """
        Insert a new task and assign its generated ID.

        Returns:
            The same entity, now with `id` set
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                """
                INSERT INTO todo_tasks (
                    title, description, assigned_to, category_id,
                    due_date, reminder_at, is_completed, completed_at,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    task.title,
                    task.description,
                    task.assigned_to,
                    task.category_id,
                    format_iso8601(task.due_date),
                    format_iso8601(task.reminder_at),
                    int(task.is_completed),
                    format_iso8601(task.completed_at),
                    format_iso8601(task.created_at),
                    format_iso8601(task.updated_at),
                ),
            )
            task.id = cursor.lastrowid
        return task

    async def update(self, task: TodoTask):
        """Persist all mutable fields of an existing task."""
        async with self.db.transaction():
            await self.db.execute(
                """
                UPDATE todo_tasks
                SET title = ?, description = ?, assigned_to = ?, category_id = ?,
                    due_date = ?, reminder_at = ?, is_completed = ?, completed_at = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    task.title,
                    task.description,
                    task.assigned_to,
                    task.category_id,
                    format_iso8601(task.due_date),
                    format_iso8601(task.reminder_at),
                    int(task.is_completed),
                    format_iso8601(task.completed_at),
                    format_iso8601(task.updated_at),
                    task.id,
                ),
            )

    async def delete(self, task_id: int):
        """Delete task (no-op when it does not exist)."""
        async with self.db.transaction():
            await self.db.execute("DELETE FROM todo_tasks WHERE id = ?", (task_id,))

    async def exists(self, task_id: int) -> bool:
        """Check whether a task with this ID exists."""
        async with self.db.transaction():
            row = await self.db.fetch_one(
                "SELECT 1 FROM todo_tasks WHERE id = ?",
                (task_id,),
            )
        return row is not None

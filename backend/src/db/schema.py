"""
Database schema definitions for todo task persistence.

Uses SQLite with:
- TEXT timestamps (ISO8601 format, UTC)
- CHECK constraints mirroring the entity invariants
- No foreign key from tasks to categories (category_id = 0 means none)
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..domain import Category, TaskColor, TodoTask


# ==================== Row Records ====================

class CategoryRecord(BaseModel):
    """Category database record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    color: Optional[TaskColor] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    def to_entity(self) -> Category:
        return Category(
            id=self.id,
            name=self.name,
            description=self.description,
            color=self.color,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class TodoTaskRecord(BaseModel):
    """Todo task database record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    assigned_to: int = 0
    category_id: int = 0
    due_date: Optional[datetime] = None
    reminder_at: Optional[datetime] = None
    is_completed: bool = False
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    def to_entity(self, category: Optional[Category] = None) -> TodoTask:
        return TodoTask(
            id=self.id,
            title=self.title,
            description=self.description,
            assigned_to=self.assigned_to,
            category_id=self.category_id,
            due_date=self.due_date,
            reminder_at=self.reminder_at,
            is_completed=self.is_completed,
            completed_at=self.completed_at,
            created_at=self.created_at,
            updated_at=self.updated_at,
            category=category,
        )


# ==================== SQL DDL ====================

SCHEMA_SQL = """
-- Enable foreign keys and optimize for web app workload
PRAGMA foreign_keys = ON;
PRAGMA journal_mode = WAL;
PRAGMA synchronous = NORMAL;
PRAGMA busy_timeout = 5000;

CREATE TABLE IF NOT EXISTS categories (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL CHECK (length(name) BETWEEN 1 AND 30),
    description TEXT,
    color INTEGER CHECK (color IS NULL OR color BETWEEN 0 AND 3),
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),
    updated_at TEXT
);

CREATE TABLE IF NOT EXISTS todo_tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL CHECK (length(title) BETWEEN 1 AND 50),
    description TEXT CHECK (description IS NULL OR length(description) <= 500),
    assigned_to INTEGER NOT NULL DEFAULT 0,
    category_id INTEGER NOT NULL DEFAULT 0,  -- 0 = uncategorised
    due_date TEXT,
    reminder_at TEXT,
    is_completed INTEGER NOT NULL DEFAULT 0 CHECK (is_completed IN (0, 1)),
    completed_at TEXT,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),
    updated_at TEXT
);

CREATE INDEX IF NOT EXISTS idx_todo_tasks_category_id ON todo_tasks(category_id);
CREATE INDEX IF NOT EXISTS idx_todo_tasks_assigned_to ON todo_tasks(assigned_to);
"""

# Starter rows; INSERT OR IGNORE keeps this idempotent across restarts
SEED_SQL = """
INSERT OR IGNORE INTO categories (id, name, description, color, created_at) VALUES
    (1, 'Work', 'Work related tasks', 3, '2024-01-01T00:00:00.000000Z'),
    (2, 'Personal', 'Personal tasks', 2, '2024-01-01T00:00:00.000000Z'),
    (3, 'Shopping', 'Shopping list items', 0, '2024-01-01T00:00:00.000000Z');

INSERT OR IGNORE INTO todo_tasks (
    id, title, description, category_id, assigned_to,
    is_completed, due_date, completed_at, created_at
) VALUES
    (1, 'Complete project proposal', 'Finish the Q1 project proposal document', 1, 1,
     0, '2024-12-31T00:00:00.000000Z', NULL, '2024-01-01T00:00:00.000000Z'),
    (2, 'Buy groceries', 'Milk, bread, eggs, and fruits', 3, 1,
     0, '2024-12-25T00:00:00.000000Z', NULL, '2024-01-01T00:00:00.000000Z'),
    (3, 'Schedule dentist appointment', 'Annual checkup', 2, 1,
     1, NULL, '2024-06-15T00:00:00.000000Z', '2024-01-01T00:00:00.000000Z');
"""


# ==================== Helper Functions ====================

ISO8601_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def format_iso8601(dt: Optional[datetime]) -> Optional[str]:
    """Format datetime to ISO8601 UTC string (None passes through)."""
    if dt is None:
        return None
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime(ISO8601_FORMAT)

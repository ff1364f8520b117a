"""
Request value objects consumed by the entities.

Update requests track which fields the caller actually sent: a field is
"present" when its name is in `model_fields_set`, including when it was sent
as an explicit null. Omitted fields are never applied.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .colors import TaskColor
from .entity import MAX_ID, as_utc


class _RequestModel(BaseModel):
    """Shared behaviour for entity requests."""

    def has(self, name: str) -> bool:
        """True if the caller provided `name`, even as null."""
        return name in self.model_fields_set


class CreateTodoTaskRequest(_RequestModel):
    """Data for a new task."""
    title: str
    description: Optional[str] = None
    assigned_to: Optional[int] = Field(None, le=MAX_ID)
    category_id: Optional[int] = Field(None, le=MAX_ID)
    due_date: Optional[datetime] = None
    reminder_at: Optional[datetime] = None

    @field_validator("due_date", "reminder_at")
    @classmethod
    def _to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class UpdateTodoTaskRequest(_RequestModel):
    """Partial task update; only present fields are applied."""
    title: Optional[str] = None
    description: Optional[str] = None
    assigned_to: Optional[int] = Field(None, le=MAX_ID)
    category_id: Optional[int] = Field(None, le=MAX_ID)
    due_date: Optional[datetime] = None
    reminder_at: Optional[datetime] = None

    @field_validator("due_date", "reminder_at")
    @classmethod
    def _to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class CreateCategoryRequest(_RequestModel):
    """Data for a new category."""
    name: str
    description: Optional[str] = None
    color: Optional[TaskColor] = None


class UpdateCategoryRequest(_RequestModel):
    """Partial category update; only present fields are applied."""
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[TaskColor] = None

    @property
    def has_color(self) -> bool:
        # Explicit null counts as "not provided" for color.
        return self.has("color") and isinstance(self.color, TaskColor)

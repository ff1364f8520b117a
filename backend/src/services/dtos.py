"""
Response shapes returned by the handlers.

Built straight from entities with `model_validate(entity)`; computed entity
properties (`color_hex`, `is_overdue`) are read like plain attributes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..domain import Category, TaskColor, TodoTask


class CategoryDto(BaseModel):
    """Category as exposed over the API."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    color: Optional[TaskColor] = None
    color_hex: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDto":
        return cls.model_validate(category)


class TodoTaskDto(BaseModel):
    """Task as exposed over the API, with its category when one is loaded."""
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
    is_overdue: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None
    category: Optional[CategoryDto] = None

    @classmethod
    def from_entity(cls, task: TodoTask) -> "TodoTaskDto":
        return cls.model_validate(task)

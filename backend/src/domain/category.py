"""
Category aggregate - groups tasks by type or context (Work, Personal, ...).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .colors import TaskColor
from .entity import Entity
from .errors import InvalidArgumentError
from .requests import CreateCategoryRequest, UpdateCategoryRequest

NAME_MAX_LENGTH = 30


def _checked_name(name: Optional[str]) -> str:
    trimmed = (name or "").strip()
    if not trimmed:
        raise InvalidArgumentError("Category name cannot be empty", field="name")
    if len(trimmed) > NAME_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Category name cannot exceed {NAME_MAX_LENGTH} characters", field="name"
        )
    return trimmed


def _trimmed(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class Category(Entity):
    """Named, optionally colored bucket for tasks."""

    def __init__(
        self,
        *,
        name: str,
        description: Optional[str] = None,
        color: Optional[TaskColor] = None,
        id: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        super().__init__(id=id, created_at=created_at, updated_at=updated_at)
        self.name = name
        self.description = description
        self.color = TaskColor(color) if color is not None else None

    @classmethod
    def create(cls, request: CreateCategoryRequest) -> "Category":
        """
        Create a category.

        Raises:
            InvalidArgumentError: Name empty or longer than 30 characters
        """
        return cls(
            name=_checked_name(request.name),
            description=_trimmed(request.description),
            color=request.color,
        )

    def update(self, request: UpdateCategoryRequest) -> None:
        """
        Apply the fields present in `request` and refresh `updated_at`.

        Color changes only when a defined TaskColor was sent.
        """
        name = _checked_name(request.name) if request.has("name") else None

        if request.has("name"):
            self.name = name
        if request.has("description"):
            self.description = _trimmed(request.description)
        if request.has_color:
            self.color = request.color

        self.touch()

    @property
    def color_hex(self) -> Optional[str]:
        return self.color.hex_code if self.color is not None else None

"""
TodoTask aggregate - a unit of work with title, schedule and completion state.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from .entity import Entity, as_utc, utc_now
from .errors import InvalidArgumentError, InvalidStateError
from .requests import CreateTodoTaskRequest, UpdateTodoTaskRequest

if TYPE_CHECKING:
    from .category import Category

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500


def _checked_title(title: Optional[str]) -> str:
    """Validate and trim a title."""
    trimmed = (title or "").strip()
    if not trimmed:
        raise InvalidArgumentError("Title cannot be empty", field="title")
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Title cannot exceed {TITLE_MAX_LENGTH} characters", field="title"
        )
    return trimmed


def _checked_description(description: Optional[str]) -> Optional[str]:
    """Validate and trim an optional description."""
    if description is None:
        return None
    trimmed = description.strip()
    if len(trimmed) > DESCRIPTION_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
            field="description",
        )
    return trimmed


class TodoTask(Entity):
    """
    Task to be completed.

    Build new tasks with `TodoTask.create()`; the constructor itself does not
    validate and is meant for rehydrating rows from the store.

    `category` is filled in by the repository when the referenced category
    exists, otherwise it stays None.
    """

    def __init__(
        self,
        *,
        title: str,
        description: Optional[str] = None,
        assigned_to: int = 0,
        category_id: int = 0,
        due_date: Optional[datetime] = None,
        reminder_at: Optional[datetime] = None,
        is_completed: bool = False,
        completed_at: Optional[datetime] = None,
        id: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        category: Optional["Category"] = None,
    ):
        super().__init__(id=id, created_at=created_at, updated_at=updated_at)
        self.title = title
        self.description = description
        self.assigned_to = assigned_to
        self.category_id = category_id
        self.due_date = as_utc(due_date)
        self.reminder_at = as_utc(reminder_at)
        self.is_completed = is_completed
        self.completed_at = as_utc(completed_at)
        self.category = category

    @classmethod
    def create(cls, request: CreateTodoTaskRequest) -> "TodoTask":
        """
        Create a new, not yet completed task.

        Args:
            request: Title (required), description and optional references/dates

        Returns:
            New TodoTask with trimmed text fields; missing assignee/category are 0

        Raises:
            InvalidArgumentError: Title empty or over 50 chars, description over 500
        """
        title = _checked_title(request.title)
        description = _checked_description(request.description)
        return cls(
            title=title,
            description=description,
            assigned_to=request.assigned_to if request.assigned_to is not None else 0,
            category_id=request.category_id if request.category_id is not None else 0,
            due_date=request.due_date,
            reminder_at=request.reminder_at,
            is_completed=False,
        )

    def update(self, request: UpdateTodoTaskRequest) -> None:
        """
        Apply the fields present in `request`.

        All present fields are validated before anything changes. `updated_at`
        is refreshed even when no field was present.

        Raises:
            InvalidArgumentError: Title or description breaks its length rule
        """
        title = _checked_title(request.title) if request.has("title") else None
        description = (
            _checked_description(request.description) if request.has("description") else None
        )

        if request.has("title"):
            self.title = title
        if request.has("description"):
            self.description = description
        if request.has("assigned_to"):
            self.assigned_to = request.assigned_to if request.assigned_to is not None else 0
        if request.has("category_id"):
            self.category_id = request.category_id if request.category_id is not None else 0
            if self.category is not None and self.category.id != self.category_id:
                self.category = None
        if request.has("reminder_at"):
            self.reminder_at = request.reminder_at
        if request.has("due_date"):
            self.due_date = request.due_date

        self.touch()

    def complete(self) -> None:
        """
        Mark the task as completed. There is no way back.

        Raises:
            InvalidStateError: Task is already completed
        """
        if self.is_completed:
            raise InvalidStateError("Task is already completed")

        now = utc_now()
        self.is_completed = True
        self.completed_at = now
        self.updated_at = now

    @property
    def is_overdue(self) -> bool:
        """Due date passed and task still open."""
        return (
            self.due_date is not None
            and not self.is_completed
            and utc_now() > self.due_date
        )

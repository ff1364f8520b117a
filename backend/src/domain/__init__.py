"""
Domain model for todo tasks and categories.

Entities own their validation and mutation rules; the store only persists
them. Nothing in this package performs I/O.
"""

from .category import Category
from .colors import TaskColor
from .entity import MAX_ID, Entity, as_utc, utc_now
from .errors import (
    DomainError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    ValidationFailedError,
    ValidationIssue,
)
from .paging import MAX_PAGE_SIZE, PagedResult, PaginationRequest, paginate
from .requests import (
    CreateCategoryRequest,
    CreateTodoTaskRequest,
    UpdateCategoryRequest,
    UpdateTodoTaskRequest,
)
from .todo_task import TodoTask

__all__ = [
    # Entities
    "Entity",
    "MAX_ID",
    "TodoTask",
    "Category",
    "TaskColor",
    # Requests
    "CreateTodoTaskRequest",
    "UpdateTodoTaskRequest",
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    # Paging
    "MAX_PAGE_SIZE",
    "PaginationRequest",
    "PagedResult",
    "paginate",
    # Errors
    "DomainError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotFoundError",
    "ValidationFailedError",
    "ValidationIssue",
    # Time
    "utc_now",
    "as_utc",
]

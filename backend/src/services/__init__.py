"""
Services module - request handling layer.

This module provides:
- mediator: request dispatch with logging and validation behaviors
- todo_tasks / categories: request types, validators and handlers
- dtos: response shapes built from entities

Importing this package registers every handler and validator.
"""

from .categories import (
    CreateCategory,
    DeleteCategory,
    GetCategoryById,
    GetPagedCategories,
    UpdateCategory,
)
from .dtos import CategoryDto, TodoTaskDto
from .mediator import Mediator, Repositories, logging_behavior, validation_behavior
from .todo_tasks import (
    CompleteTodoTask,
    CreateTodoTask,
    DeleteTodoTask,
    GetPagedTodoTasks,
    GetTodoTaskById,
    GetTodoTasksByCategory,
    UpdateTodoTask,
)

__all__ = [
    # Mediator
    "Mediator",
    "Repositories",
    "logging_behavior",
    "validation_behavior",
    # DTOs
    "CategoryDto",
    "TodoTaskDto",
    # Todo task requests
    "CreateTodoTask",
    "UpdateTodoTask",
    "CompleteTodoTask",
    "DeleteTodoTask",
    "GetTodoTaskById",
    "GetPagedTodoTasks",
    "GetTodoTasksByCategory",
    # Category requests
    "CreateCategory",
    "UpdateCategory",
    "DeleteCategory",
    "GetCategoryById",
    "GetPagedCategories",
]

"""
Todo task requests, their validators and handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..domain import (
    CreateTodoTaskRequest,
    NotFoundError,
    PagedResult,
    PaginationRequest,
    TodoTask,
    UpdateTodoTaskRequest,
    ValidationIssue,
    paginate,
)
from ..domain.paging import DEFAULT_PAGE_SIZE
from ..domain.todo_task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from .dtos import TodoTaskDto
from .mediator import Mediator, Repositories
from .validation import IssueCollector, check_id, check_page


# ==================== Requests ====================

@dataclass(frozen=True, slots=True)
class CreateTodoTask:
    data: CreateTodoTaskRequest


@dataclass(frozen=True, slots=True)
class UpdateTodoTask:
    id: int
    data: UpdateTodoTaskRequest


@dataclass(frozen=True, slots=True)
class CompleteTodoTask:
    id: int


@dataclass(frozen=True, slots=True)
class DeleteTodoTask:
    id: int


@dataclass(frozen=True, slots=True)
class GetTodoTaskById:
    id: int


@dataclass(frozen=True, slots=True)
class GetPagedTodoTasks:
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True, slots=True)
class GetTodoTasksByCategory:
    category_id: int
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


# ==================== Validators ====================

TITLE_REQUIRED = "Title is required"
TITLE_TOO_LONG = f"Title cannot exceed {TITLE_MAX_LENGTH} characters"
DESCRIPTION_TOO_LONG = f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
DUE_DATE_IN_PAST = "Due date must be in future"
REMINDER_IN_PAST = "Reminder date must be in future"
CATEGORY_ID_NOT_POSITIVE = "Category ID must be greater than 0"
ASSIGNED_TO_NOT_POSITIVE = "Assigned to Id must be greater than 0"


@Mediator.validator(CreateTodoTask)
def validate_create_todo_task(request: CreateTodoTask) -> List[ValidationIssue]:
    data = request.data
    issues = IssueCollector()
    issues.text(
        data.title,
        "title",
        max_length=TITLE_MAX_LENGTH,
        required_message=TITLE_REQUIRED,
        too_long_message=TITLE_TOO_LONG,
    )
    issues.text(
        data.description,
        "description",
        max_length=DESCRIPTION_MAX_LENGTH,
        required_message=None,
        too_long_message=DESCRIPTION_TOO_LONG,
    )
    issues.in_future(data.due_date, "due_date", DUE_DATE_IN_PAST)
    issues.in_future(data.reminder_at, "reminder_at", REMINDER_IN_PAST)
    issues.positive(data.category_id, "category_id", CATEGORY_ID_NOT_POSITIVE)
    issues.positive(data.assigned_to, "assigned_to", ASSIGNED_TO_NOT_POSITIVE)
    return issues.issues


@Mediator.validator(UpdateTodoTask)
def validate_update_todo_task(request: UpdateTodoTask) -> List[ValidationIssue]:
    """Same rules as create, for fields that were sent with a value."""
    data = request.data
    issues = IssueCollector()
    issues.issues.extend(check_id(request.id))
    if data.title is not None:
        issues.text(
            data.title,
            "title",
            max_length=TITLE_MAX_LENGTH,
            required_message=TITLE_REQUIRED,
            too_long_message=TITLE_TOO_LONG,
        )
    issues.text(
        data.description,
        "description",
        max_length=DESCRIPTION_MAX_LENGTH,
        required_message=None,
        too_long_message=DESCRIPTION_TOO_LONG,
    )
    issues.in_future(data.due_date, "due_date", DUE_DATE_IN_PAST)
    issues.in_future(data.reminder_at, "reminder_at", REMINDER_IN_PAST)
    issues.positive(data.category_id, "category_id", CATEGORY_ID_NOT_POSITIVE)
    issues.positive(data.assigned_to, "assigned_to", ASSIGNED_TO_NOT_POSITIVE)
    return issues.issues


@Mediator.validator(CompleteTodoTask, DeleteTodoTask, GetTodoTaskById)
def validate_task_id(request) -> List[ValidationIssue]:
    return check_id(request.id)


@Mediator.validator(GetPagedTodoTasks)
def validate_paged_todo_tasks(request: GetPagedTodoTasks) -> List[ValidationIssue]:
    return check_page(request.page_number, request.page_size)


@Mediator.validator(GetTodoTasksByCategory)
def validate_todo_tasks_by_category(request: GetTodoTasksByCategory) -> List[ValidationIssue]:
    return check_id(request.category_id, "category_id") + check_page(
        request.page_number, request.page_size
    )


# ==================== Handlers ====================

async def _get_or_raise(repos: Repositories, task_id: int) -> TodoTask:
    task = await repos.tasks.get_by_id(task_id)
    if task is None:
        raise NotFoundError("TodoTask", task_id)
    return task


@Mediator.handler(CreateTodoTask)
async def create_todo_task(request: CreateTodoTask, repos: Repositories) -> TodoTaskDto:
    """
    Create and store a task.

    Raises:
        NotFoundError: category_id given but no such category
        InvalidArgumentError: Entity rules rejected the data
    """
    category = None
    category_id = request.data.category_id
    if category_id is not None and category_id > 0:
        category = await repos.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)

    task = TodoTask.create(request.data)
    await repos.tasks.add(task)
    task.category = category
    return TodoTaskDto.from_entity(task)


@Mediator.handler(GetTodoTaskById)
async def get_todo_task_by_id(request: GetTodoTaskById, repos: Repositories) -> TodoTaskDto:
    return TodoTaskDto.from_entity(await _get_or_raise(repos, request.id))


@Mediator.handler(GetPagedTodoTasks)
async def get_paged_todo_tasks(
    request: GetPagedTodoTasks, repos: Repositories
) -> PagedResult[TodoTaskDto]:
    page = await repos.tasks.get_paged(
        PaginationRequest(page_number=request.page_number, page_size=request.page_size)
    )
    return page.map(TodoTaskDto.from_entity, TodoTaskDto)


@Mediator.handler(GetTodoTasksByCategory)
async def get_todo_tasks_by_category(
    request: GetTodoTasksByCategory, repos: Repositories
) -> PagedResult[TodoTaskDto]:
    """Page through one category's tasks (all loaded, then windowed in memory)."""
    if not await repos.categories.exists(request.category_id):
        raise NotFoundError("Category", request.category_id)

    tasks = await repos.tasks.get_by_category(request.category_id)
    page = paginate(
        tasks,
        PaginationRequest(page_number=request.page_number, page_size=request.page_size),
    )
    return page.map(TodoTaskDto.from_entity, TodoTaskDto)


@Mediator.handler(UpdateTodoTask)
async def update_todo_task(request: UpdateTodoTask, repos: Repositories) -> None:
    task = await _get_or_raise(repos, request.id)
    task.update(request.data)
    await repos.tasks.update(task)


@Mediator.handler(CompleteTodoTask)
async def complete_todo_task(request: CompleteTodoTask, repos: Repositories) -> TodoTaskDto:
    """
    Mark a task completed.

    Raises:
        NotFoundError: No task with this id
        InvalidStateError: Task already completed
    """
    task = await _get_or_raise(repos, request.id)
    task.complete()
    await repos.tasks.update(task)
    return TodoTaskDto.from_entity(task)


@Mediator.handler(DeleteTodoTask)
async def delete_todo_task(request: DeleteTodoTask, repos: Repositories) -> None:
    if not await repos.tasks.exists(request.id):
        raise NotFoundError("TodoTask", request.id)
    await repos.tasks.delete(request.id)

"""
Todo Tasks Router - API endpoints for task management
"""
import logging

from fastapi import APIRouter, Depends, Response, status

from ...domain import CreateTodoTaskRequest, PagedResult, UpdateTodoTaskRequest
from ...domain.paging import DEFAULT_PAGE_SIZE
from ...services import (
    CompleteTodoTask,
    CreateTodoTask,
    DeleteTodoTask,
    GetPagedTodoTasks,
    GetTodoTaskById,
    Mediator,
    TodoTaskDto,
    UpdateTodoTask,
)
from ..dependencies import EntityId, PageNumber, PageSize, get_mediator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/todotasks", tags=["todotasks"])


@router.get("/paged", response_model=PagedResult[TodoTaskDto])
async def get_paged_todo_tasks(
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    mediator: Mediator = Depends(get_mediator),
):
    """List tasks one page at a time, ordered by id."""
    return await mediator.send(
        GetPagedTodoTasks(page_number=page_number, page_size=page_size)
    )


@router.get("/{task_id}", response_model=TodoTaskDto)
async def get_todo_task(task_id: EntityId, mediator: Mediator = Depends(get_mediator)):
    """Get a single task with its category."""
    return await mediator.send(GetTodoTaskById(id=task_id))


@router.post("", response_model=TodoTaskDto, status_code=status.HTTP_201_CREATED)
async def create_todo_task(
    payload: CreateTodoTaskRequest,
    response: Response,
    mediator: Mediator = Depends(get_mediator),
):
    """
    Create a task.

    Returns 201 with a Location header pointing at the new task.
    """
    dto = await mediator.send(CreateTodoTask(data=payload))
    response.headers["Location"] = f"{router.prefix}/{dto.id}"
    logger.info(f"Created task {dto.id}")
    return dto


@router.put("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_todo_task(
    task_id: EntityId,
    payload: UpdateTodoTaskRequest,
    mediator: Mediator = Depends(get_mediator),
):
    """
    Partially update a task.

    Only the keys present in the body are applied; an explicit null clears
    the field (assignee and category fall back to 0).
    """
    await mediator.send(UpdateTodoTask(id=task_id, data=payload))
    logger.info(f"Updated task {task_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{task_id}/complete", response_model=TodoTaskDto)
async def complete_todo_task(task_id: EntityId, mediator: Mediator = Depends(get_mediator)):
    """Mark a task completed; completing it twice is a 400."""
    dto = await mediator.send(CompleteTodoTask(id=task_id))
    logger.info(f"Completed task {task_id}")
    return dto


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_todo_task(task_id: EntityId, mediator: Mediator = Depends(get_mediator)):
    await mediator.send(DeleteTodoTask(id=task_id))
    logger.info(f"Deleted task {task_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

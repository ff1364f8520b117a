"""
Categories Router - API endpoints for category management
"""
import logging

from fastapi import APIRouter, Depends, Response, status

from ...domain import CreateCategoryRequest, PagedResult, UpdateCategoryRequest
from ...domain.paging import DEFAULT_PAGE_SIZE
from ...services import (
    CategoryDto,
    CreateCategory,
    DeleteCategory,
    GetCategoryById,
    GetPagedCategories,
    GetTodoTasksByCategory,
    Mediator,
    TodoTaskDto,
    UpdateCategory,
)
from ..dependencies import EntityId, PageNumber, PageSize, get_mediator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=PagedResult[CategoryDto])
async def get_paged_categories(
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    mediator: Mediator = Depends(get_mediator),
):
    """List categories one page at a time, ordered by id."""
    return await mediator.send(
        GetPagedCategories(page_number=page_number, page_size=page_size)
    )


@router.get("/{category_id}", response_model=CategoryDto)
async def get_category(category_id: EntityId, mediator: Mediator = Depends(get_mediator)):
    return await mediator.send(GetCategoryById(id=category_id))


@router.get("/{category_id}/tasks", response_model=PagedResult[TodoTaskDto])
async def get_category_tasks(
    category_id: EntityId,
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    mediator: Mediator = Depends(get_mediator),
):
    """List the tasks of one category, paged."""
    return await mediator.send(
        GetTodoTasksByCategory(
            category_id=category_id, page_number=page_number, page_size=page_size
        )
    )


@router.post("", response_model=CategoryDto, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CreateCategoryRequest,
    response: Response,
    mediator: Mediator = Depends(get_mediator),
):
    """
    Create a category.

    Returns 201 with a Location header pointing at the new category.
    """
    dto = await mediator.send(CreateCategory(data=payload))
    response.headers["Location"] = f"{router.prefix}/{dto.id}"
    logger.info(f"Created category {dto.id}")
    return dto


@router.put("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_category(
    category_id: EntityId,
    payload: UpdateCategoryRequest,
    mediator: Mediator = Depends(get_mediator),
):
    """Partially update a category; a null color leaves it unchanged."""
    await mediator.send(UpdateCategory(id=category_id, data=payload))
    logger.info(f"Updated category {category_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: EntityId, mediator: Mediator = Depends(get_mediator)):
    """Delete a category. Its tasks stay and read back without a category."""
    await mediator.send(DeleteCategory(id=category_id))
    logger.info(f"Deleted category {category_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

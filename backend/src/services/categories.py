"""
Category requests, their validators and handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..domain import (
    Category,
    CreateCategoryRequest,
    NotFoundError,
    PagedResult,
    PaginationRequest,
    UpdateCategoryRequest,
    ValidationIssue,
)
from ..domain.category import NAME_MAX_LENGTH
from ..domain.paging import DEFAULT_PAGE_SIZE
from .dtos import CategoryDto
from .mediator import Mediator, Repositories
from .validation import IssueCollector, check_id, check_page


# ==================== Requests ====================

@dataclass(frozen=True, slots=True)
class CreateCategory:
    data: CreateCategoryRequest


@dataclass(frozen=True, slots=True)
class UpdateCategory:
    id: int
    data: UpdateCategoryRequest


@dataclass(frozen=True, slots=True)
class DeleteCategory:
    id: int


@dataclass(frozen=True, slots=True)
class GetCategoryById:
    id: int


@dataclass(frozen=True, slots=True)
class GetPagedCategories:
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


# ==================== Validators ====================

NAME_REQUIRED = "Category name is required"
NAME_TOO_LONG = f"Maximum {NAME_MAX_LENGTH} characters are allowed for name"


@Mediator.validator(CreateCategory)
def validate_create_category(request: CreateCategory) -> List[ValidationIssue]:
    issues = IssueCollector()
    issues.text(
        request.data.name,
        "name",
        max_length=NAME_MAX_LENGTH,
        required_message=NAME_REQUIRED,
        too_long_message=NAME_TOO_LONG,
    )
    return issues.issues


@Mediator.validator(UpdateCategory)
def validate_update_category(request: UpdateCategory) -> List[ValidationIssue]:
    issues = IssueCollector()
    issues.issues.extend(check_id(request.id))
    if request.data.has("name"):
        issues.text(
            request.data.name,
            "name",
            max_length=NAME_MAX_LENGTH,
            required_message=NAME_REQUIRED,
            too_long_message=NAME_TOO_LONG,
        )
    return issues.issues


@Mediator.validator(DeleteCategory, GetCategoryById)
def validate_category_id(request) -> List[ValidationIssue]:
    return check_id(request.id)


@Mediator.validator(GetPagedCategories)
def validate_paged_categories(request: GetPagedCategories) -> List[ValidationIssue]:
    return check_page(request.page_number, request.page_size)


# ==================== Handlers ====================

async def _get_or_raise(repos: Repositories, category_id: int) -> Category:
    category = await repos.categories.get_by_id(category_id)
    if category is None:
        raise NotFoundError("Category", category_id)
    return category


@Mediator.handler(CreateCategory)
async def create_category(request: CreateCategory, repos: Repositories) -> CategoryDto:
    category = Category.create(request.data)
    await repos.categories.add(category)
    return CategoryDto.from_entity(category)


@Mediator.handler(GetCategoryById)
async def get_category_by_id(request: GetCategoryById, repos: Repositories) -> CategoryDto:
    return CategoryDto.from_entity(await _get_or_raise(repos, request.id))


@Mediator.handler(GetPagedCategories)
async def get_paged_categories(
    request: GetPagedCategories, repos: Repositories
) -> PagedResult[CategoryDto]:
    page = await repos.categories.get_paged(
        PaginationRequest(page_number=request.page_number, page_size=request.page_size)
    )
    return page.map(CategoryDto.from_entity, CategoryDto)


@Mediator.handler(UpdateCategory)
async def update_category(request: UpdateCategory, repos: Repositories) -> None:
    category = await _get_or_raise(repos, request.id)
    category.update(request.data)
    await repos.categories.update(category)


@Mediator.handler(DeleteCategory)
async def delete_category(request: DeleteCategory, repos: Repositories) -> None:
    """
    Delete a category. Tasks that referenced it keep their category_id and
    read back without a category.
    """
    if not await repos.categories.exists(request.id):
        raise NotFoundError("Category", request.id)
    await repos.categories.delete(request.id)

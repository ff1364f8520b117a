"""
Pagination - page window arithmetic and the paged result wrapper.
"""

from __future__ import annotations

import math
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class PaginationRequest(BaseModel):
    """Requested page: 1-based page number and page size."""

    page_number: int = Field(1, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class PagedResult(BaseModel, Generic[T]):
    """
    One page of an ordered collection plus total-count metadata.

    `total_count` counts the whole collection, not the window. A page number
    past `total_pages` is valid and simply has no items.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: List[T] = Field(default_factory=list)
    total_count: int = Field(0, ge=0)
    page_number: int = Field(1, ge=1)
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1)

    @computed_field
    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @computed_field
    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @computed_field
    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    def map(
        self, fn: Callable[[T], U], item_type: Optional[type] = None
    ) -> "PagedResult[U]":
        """
        Convert every item, keeping the page metadata.

        Args:
            fn: Item converter
            item_type: Parametrise the result as PagedResult[item_type]
        """
        result_cls = PagedResult[item_type] if item_type is not None else PagedResult
        return result_cls(
            items=[fn(item) for item in self.items],
            total_count=self.total_count,
            page_number=self.page_number,
            page_size=self.page_size,
        )


def paginate(items: Sequence[T], request: PaginationRequest) -> PagedResult[T]:
    """Cut the requested window out of an in-memory ordered sequence."""
    window = list(items[request.offset : request.offset + request.limit])
    return PagedResult(
        items=window,
        total_count=len(items),
        page_number=request.page_number,
        page_size=request.page_size,
    )

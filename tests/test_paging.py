"""
Pagination window arithmetic and PagedResult metadata.
"""

import pytest
from pydantic import ValidationError

from backend.src.domain import PagedResult, PaginationRequest, paginate


def test_offset_and_limit():
    request = PaginationRequest(page_number=3, page_size=10)
    assert request.offset == 20
    assert request.limit == 10


@pytest.mark.parametrize(
    "fields",
    [
        {"page_number": 0},
        {"page_size": 0},
        {"page_size": 101},
    ],
)
def test_pagination_request_bounds(fields):
    with pytest.raises(ValidationError):
        PaginationRequest(**fields)


@pytest.mark.parametrize(
    "total, size, pages",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (95, 20, 5)],
)
def test_total_pages_is_ceiling(total, size, pages):
    result = PagedResult(items=[], total_count=total, page_number=1, page_size=size)
    assert result.total_pages == pages


def test_navigation_flags():
    first = PagedResult(items=[], total_count=25, page_number=1, page_size=10)
    middle = PagedResult(items=[], total_count=25, page_number=2, page_size=10)
    last = PagedResult(items=[], total_count=25, page_number=3, page_size=10)

    assert (first.has_previous_page, first.has_next_page) == (False, True)
    assert (middle.has_previous_page, middle.has_next_page) == (True, True)
    assert (last.has_previous_page, last.has_next_page) == (True, False)


def test_paginate_single_partial_page():
    page = paginate([1, 2, 3], PaginationRequest(page_number=1, page_size=10))

    assert page.items == [1, 2, 3]
    assert page.total_count == 3
    assert page.total_pages == 1
    assert page.has_next_page is False
    assert page.has_previous_page is False


def test_paginate_windows():
    items = list(range(1, 26))

    page = paginate(items, PaginationRequest(page_number=3, page_size=10))
    assert page.items == [21, 22, 23, 24, 25]
    assert page.total_count == 25
    assert page.total_pages == 3


def test_paginate_past_the_end_is_empty():
    page = paginate([1, 2, 3], PaginationRequest(page_number=5, page_size=2))
    assert page.items == []
    assert page.total_count == 3
    assert page.has_previous_page is True
    assert page.has_next_page is False


def test_map_keeps_metadata():
    page = paginate([1, 2, 3], PaginationRequest(page_number=1, page_size=2))
    mapped = page.map(str)

    assert mapped.items == ["1", "2"]
    assert (mapped.total_count, mapped.page_number, mapped.page_size) == (3, 1, 2)


def test_computed_fields_are_serialized():
    page = PagedResult(items=[1], total_count=3, page_number=1, page_size=1)
    data = page.model_dump()
    assert data["total_pages"] == 3
    assert data["has_next_page"] is True
    assert data["has_previous_page"] is False

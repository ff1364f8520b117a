"""
Validation rule helpers shared by the request validators.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from ..domain import MAX_PAGE_SIZE, ValidationIssue, utc_now


class IssueCollector:
    """Accumulates failed rules for one request."""

    def __init__(self):
        self.issues: List[ValidationIssue] = []

    def require(self, ok: bool, field: str, message: str) -> bool:
        """Record `message` for `field` unless `ok`. Returns `ok`."""
        if not ok:
            self.issues.append(ValidationIssue(field=field, message=message))
        return ok

    def text(
        self,
        value: Optional[str],
        field: str,
        *,
        max_length: int,
        required_message: Optional[str],
        too_long_message: str,
    ) -> None:
        """
        Check a text field on its trimmed value.

        A None value is only an issue when `required_message` is given.
        """
        trimmed = value.strip() if value is not None else ""
        if required_message is not None and not self.require(
            bool(trimmed), field, required_message
        ):
            return
        self.require(len(trimmed) <= max_length, field, too_long_message)

    def in_future(self, value: Optional[datetime], field: str, message: str) -> None:
        if value is not None:
            self.require(value > utc_now(), field, message)

    def positive(self, value: Optional[int], field: str, message: str) -> None:
        if value is not None:
            self.require(value > 0, field, message)


def check_id(value: int, field: str = "id") -> List[ValidationIssue]:
    issues = IssueCollector()
    issues.require(value > 0, field, "Id must be greater than 0")
    return issues.issues


def check_page(page_number: int, page_size: int) -> List[ValidationIssue]:
    """Page number > 0 and 0 < page size <= MAX_PAGE_SIZE."""
    issues = IssueCollector()
    issues.require(page_number > 0, "page_number", "Page number must be greater than 0")
    if issues.require(page_size > 0, "page_size", "Page size must be greater than 0"):
        issues.require(
            page_size <= MAX_PAGE_SIZE,
            "page_size",
            f"Max page size is {MAX_PAGE_SIZE}",
        )
    return issues.issues

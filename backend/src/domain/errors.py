"""
Domain and application errors.

Kinds:
- InvalidArgumentError: malformed field value on an entity
- InvalidStateError: illegal state transition
- NotFoundError: referenced id does not exist in the store
- ValidationFailedError: request rejected by validators, carries every issue

Store failures are not wrapped; they propagate as raised by the driver.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


class DomainError(Exception):
    """Base class for errors the HTTP layer translates to client errors."""


class InvalidArgumentError(DomainError, ValueError):
    """A field value breaks an entity invariant."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidStateError(DomainError):
    """Operation not allowed in the entity's current state."""


class NotFoundError(DomainError, LookupError):
    """Entity with the given id does not exist."""

    def __init__(self, entity_name: str, entity_id: object):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f'Entity "{entity_name}" ({entity_id}) was not found.')

    @property
    def message(self) -> str:
        return str(self)


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One failed rule: offending field and a human-readable message."""

    field: str
    message: str


class ValidationFailedError(DomainError):
    """Raised by the validation pipeline with all collected issues."""

    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        summary = "; ".join(f"{i.field}: {i.message}" for i in self.issues)
        super().__init__(f"Validation failed: {summary}")

    def to_list(self) -> List[dict]:
        return [{"field": i.field, "message": i.message} for i in self.issues]

"""
Entity base - identity, audit timestamps and UTC time helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

# Largest id or reference the store accepts (signed 32-bit)
MAX_ID = 2**31 - 1


def utc_now() -> datetime:
    """Get current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to aware UTC.

    Naive values are taken to already be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Entity:
    """
    Base class for persisted aggregates.

    `id` stays 0 until the store assigns one. Two entities are equal when they
    have the same concrete type and the same id.
    """

    def __init__(
        self,
        id: int = 0,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self.id = id
        self.created_at = as_utc(created_at) or utc_now()
        self.updated_at = as_utc(updated_at)

    def touch(self) -> None:
        """Stamp the entity as modified now."""
        self.updated_at = utc_now()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"

"""
Request dependencies shared by the routers.
"""

from typing import Annotated

from fastapi import Path, Query, Request

from ..domain import MAX_ID
from ..services import Mediator

# Integers beyond MAX_ID cannot be bound by SQLite; reject them as 422
EntityId = Annotated[int, Path(le=MAX_ID)]
PageNumber = Annotated[int, Query(le=MAX_ID)]
PageSize = Annotated[int, Query(le=MAX_ID)]


def get_mediator(request: Request) -> Mediator:
    """Mediator created by the app lifespan."""
    return request.app.state.mediator

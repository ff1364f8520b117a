"""
Mediator - dispatches request objects to their registered handler.

This module provides:
- Decorator-based handler and validator registration keyed by request type
- A behavior pipeline wrapped around every handler call
  (logging -> validation -> handler)
- Repositories bundle passed to every handler
"""

from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    TypeVar,
)

from ..db import CategoryRepository, TodoTaskRepository
from ..domain import DomainError, ValidationFailedError, ValidationIssue

logger = logging.getLogger(__name__)

Handler = Callable[[Any, "Repositories"], Awaitable[Any]]
Validator = Callable[[Any], Iterable[ValidationIssue]]
Next = Callable[[], Awaitable[Any]]
Behavior = Callable[[Any, Next], Awaitable[Any]]

H = TypeVar("H", bound=Handler)
V = TypeVar("V", bound=Validator)


@dataclass(frozen=True, slots=True)
class Repositories:
    """Stores a handler may touch."""

    tasks: TodoTaskRepository
    categories: CategoryRepository


class Mediator:
    """
    Routes a request to the one handler registered for its type.

    Usage:
        @Mediator.validator(GetTodoTaskById)
        def validate_id(request) -> list[ValidationIssue]:
            ...

        @Mediator.handler(GetTodoTaskById)
        async def get_todo_task_by_id(request, repos: Repositories) -> TodoTaskDto:
            ...

        mediator = Mediator(Repositories(tasks=..., categories=...))
        dto = await mediator.send(GetTodoTaskById(id=1))
    """

    _handlers: Dict[type, Handler] = {}
    _validators: Dict[type, List[Validator]] = {}

    @classmethod
    def handler(cls, request_type: type) -> Callable[[H], H]:
        """
        Decorator to register the handler for a request type.

        Args:
            request_type: Request class the handler accepts

        Returns:
            Decorator function
        """

        def decorator(func: H) -> H:
            # Idempotent: re-importing a handler module is fine
            existing = cls._handlers.get(request_type)
            if existing is not None and existing is not func:
                raise ValueError(
                    f"Handler for '{request_type.__name__}' already registered"
                )
            cls._handlers[request_type] = func
            return func

        return decorator

    @classmethod
    def validator(cls, *request_types: type) -> Callable[[V], V]:
        """Decorator to add a validator for one or more request types."""

        def decorator(func: V) -> V:
            for request_type in request_types:
                registered = cls._validators.setdefault(request_type, [])
                if func not in registered:
                    registered.append(func)
            return func

        return decorator

    @classmethod
    def get_handler(cls, request_type: type) -> Optional[Handler]:
        return cls._handlers.get(request_type)

    @classmethod
    def get_validators(cls, request_type: type) -> List[Validator]:
        return list(cls._validators.get(request_type, []))

    def __init__(
        self,
        repos: Repositories,
        behaviors: Optional[Sequence[Behavior]] = None,
    ):
        """
        Args:
            repos: Repositories handed to every handler
            behaviors: Pipeline wrappers, outermost first. Defaults to
                logging then validation.
        """
        self.repos = repos
        self.behaviors: List[Behavior] = (
            list(behaviors)
            if behaviors is not None
            else [logging_behavior, validation_behavior]
        )

    async def send(self, request: Any) -> Any:
        """
        Run `request` through the behaviors and its handler.

        Raises:
            LookupError: No handler registered for the request type
            ValidationFailedError: A validator reported issues
            DomainError: Raised by the handler or the entities it uses
        """
        handler = self.get_handler(type(request))
        if handler is None:
            raise LookupError(f"No handler registered for {type(request).__name__}")

        async def call_handler() -> Any:
            return await handler(request, self.repos)

        pipeline: Next = call_handler
        for behavior in reversed(self.behaviors):
            pipeline = functools.partial(behavior, request, pipeline)
        return await pipeline()


# ==================== Behaviors ====================

async def logging_behavior(request: Any, next_: Next) -> Any:
    """Log request name on entry and elapsed time on exit."""
    name = type(request).__name__
    logger.info("Handling %s", name)
    start = time.perf_counter()
    try:
        response = await next_()
    except DomainError as e:
        logger.warning("%s failed: %s", name, e)
        raise
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("Handled %s in %.1f ms", name, elapsed_ms)
    return response


async def validation_behavior(request: Any, next_: Next) -> Any:
    """Run every validator for the request; stop before the handler on issues."""
    issues: List[ValidationIssue] = []
    for validate in Mediator.get_validators(type(request)):
        issues.extend(validate(request))
    if issues:
        raise ValidationFailedError(issues)
    return await next_()

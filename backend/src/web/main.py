"""
Main Application - FastAPI app factory and lifespan management
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from ..common import setup_logging
from ..db import CategoryRepository, DatabaseManager, TodoTaskRepository
from ..domain import (
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    ValidationFailedError,
)
from ..services import Mediator, Repositories
from .config import AppConfig
from .limiter import build_limiter
from .routers import categories, health, todo_tasks


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    config: AppConfig = app.state.config
    logger.info("Starting Todo Tasks API...")

    db_path = config.database_path
    logger.info(f"Database path: {db_path}")

    # Initialize DatabaseManager and create schema (idempotent)
    db = DatabaseManager(db_path)
    try:
        await db.init(seed=config.seed_data)
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.exception("Failed to initialize database")
        raise RuntimeError(f"Database initialization failed: {e}") from e

    app.state.db = db
    app.state.mediator = Mediator(
        Repositories(
            tasks=TodoTaskRepository(db),
            categories=CategoryRepository(db),
        )
    )

    yield

    logger.info("Shutting down...")
    try:
        await db.close()
        logger.info("Database connection closed")
    except Exception:
        logger.exception("Failed to close database cleanly")


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application"""
    config = config or AppConfig.from_env()
    setup_logging(config.log_level, config.log_file)

    app = FastAPI(
        title="Todo Tasks API",
        version="1.0.0",
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.config = config

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting
    limiter = build_limiter(config)
    app.state.limiter = limiter
    if limiter.enabled:
        app.add_middleware(SlowAPIMiddleware)

        @app.exception_handler(RateLimitExceeded)
        async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
            """Handle rate limit exceeded with JSON response."""
            return JSONResponse(
                status_code=429,
                content={"detail": "Rate limit exceeded", "retry_after": exc.detail},
            )

    # Domain exception handlers
    @app.exception_handler(ValidationFailedError)
    async def validation_failed_handler(request: Request, exc: ValidationFailedError):
        """Validator issues -> 400 with every (field, message) pair."""
        errors = exc.to_list()
        logger.warning("Validation failed: %s", errors)
        return JSONResponse(
            status_code=400,
            content={"detail": "Validation failed", "errors": errors},
        )

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        errors = [{"field": exc.field, "message": exc.message}] if exc.field else []
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "errors": errors},
        )

    @app.exception_handler(InvalidStateError)
    async def invalid_state_handler(request: Request, exc: InvalidStateError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    # Global exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle FastAPI request validation errors with clean response."""
        errors = []
        for error in exc.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            errors.append({"field": loc, "message": error["msg"]})
        logger.warning("Validation error: %s", errors)
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with logging."""
        logger.exception("Unexpected error: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # Include routers
    app.include_router(health.router)
    app.include_router(todo_tasks.router)
    app.include_router(categories.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    config = AppConfig.from_env()
    uvicorn.run(
        "backend.src.web.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


# Create app instance
app = create_app()


if __name__ == "__main__":
    run()

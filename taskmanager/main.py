"""FastAPI application entry point."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskmanager.api import health, tasks
from taskmanager.core.config import Settings, settings as default_settings
from taskmanager.core.errors import InvalidTaskError, TaskNotFoundError
from taskmanager.services.task_store import TaskStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting %s...", app.title)
    yield
    # Tasks live only in memory; they are gone once the process exits.
    logger.info("Shutting down %s (%d tasks discarded)", app.title, app.state.task_store.count())


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    return f"Invalid request: {first.get('msg', 'invalid value')}"


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate domain and framework errors into ``{"message": ...}`` bodies."""

    @app.exception_handler(TaskNotFoundError)
    async def _not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})

    @app.exception_handler(InvalidTaskError)
    async def _invalid(request: Request, exc: InvalidTaskError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _describe_validation_error(exc)
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def create_app(config: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Build the API application.

    Args:
        config: Settings to use; defaults to the environment-derived settings
        store: Task store to serve; a fresh empty store when omitted
    """
    config = config or default_settings

    app = FastAPI(
        title=config.PROJECT_NAME,
        description="In-memory task tracking API",
        version=config.VERSION,
        lifespan=lifespan,
    )
    app.state.task_store = store if store is not None else TaskStore()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    app.include_router(health.router, prefix=config.API_PREFIX, tags=["health"])
    app.include_router(tasks.router, prefix=f"{config.API_PREFIX}/tasks", tags=["tasks"])

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"message": config.PROJECT_NAME, "version": config.VERSION}

    return app


app = create_app()

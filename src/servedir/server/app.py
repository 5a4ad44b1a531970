"""FastAPI application factory."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware

from servedir import __version__
from servedir.config.models import ServerConfig
from servedir.server.routers import files

logger = logging.getLogger(__name__)


def create_app(config: ServerConfig) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        config: Server configuration

    Returns:
        Configured FastAPI app

    Raises:
        ValueError: If the served root is missing or not a directory
    """
    served_root = config.root()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Handle application lifespan events."""
        logger.info(f"Serving files from {app.state.served_root}")
        yield
        logger.info("Server shutting down")

    # Docs routes would shadow files named "docs" or "openapi.json"
    app = FastAPI(
        title="servedir",
        description="Single-endpoint static file server",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Store config on app state, read-only from here on
    app.state.config = config
    app.state.served_root = served_root

    if config.compress:
        app.add_middleware(GZipMiddleware, minimum_size=config.compress_min_size)

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):  # type: ignore
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

    app.include_router(files.router)

    return app

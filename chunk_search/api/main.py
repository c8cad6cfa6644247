"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, chunk_search.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from chunk_search import __version__
from chunk_search.api.deps.dependencies import ServiceContainer
from chunk_search.configs import Settings, get_settings
from chunk_search.observability import configure_logging
from chunk_search.observability.middleware import RequestContextMiddleware
from .routers import chunks_router, health_router, search_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds (unless one was injected) and starts the service container,
    and stops it on shutdown.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    container = app.state.container
    if container is None:
        container = ServiceContainer(settings)
        app.state.container = container
    logger.info("Starting service container...")
    await container.start()
    logger.info("Service container started")

    yield

    # Shutdown
    await container.stop()
    logger.info("Service container stopped")


def create_app(
    settings: Settings | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (environment-driven when omitted)
        container: Pre-built service container, e.g. with in-memory stores

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Chunk Search API",
        description="Hybrid vector + full-text retrieval over text chunks",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()
    app.state.container = container

    app.add_middleware(RequestContextMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chunks_router, prefix="/api/v1")
    app.include_router(search_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "chunk_search.api.main:app",
        host="0.0.0.0",
        port=8000,
    )

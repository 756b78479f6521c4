"""Main entry point for the ViralAudit API server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from viralaudit import __version__
from viralaudit.api.deps import init_session_registry
from viralaudit.api.routes import health, sessions
from viralaudit.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup."""
    init_session_registry()
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="ViralAudit",
        description="Brutal, structured critique of short ad videos",
        version=__version__,
        lifespan=lifespan,
    )

    # Include API routes
    app.include_router(health.router)
    app.include_router(sessions.router)

    return app


app = create_app()


def main() -> None:
    """Run the application."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "viralaudit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()

"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from profile_search import __version__
from profile_search.api.routes import router
from profile_search.app import app_instance
from profile_search.config.settings import get_settings
from profile_search.utils.logging import configure_logging, get_logger


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    await app_instance.startup()

    app.state.search_service = app_instance.search_service

    yield

    await app_instance.shutdown()


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Profile Search API",
        description="AI answers about link-in-bio profiles, rendered as generative UI",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api/v1")

    @app.get("/")
    async def root():
        return {
            "name": "Profile Search API",
            "version": __version__,
            "docs": "/docs",
        }

    return app


# Create application instance
app = create_app()


def main() -> None:
    """Entry point for running the application."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "profile_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""
FastAPI application entry point.

Usage:
    uvicorn books_api.main:app --reload
"""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from books_api.config import Settings, configure_logging, get_settings
from books_api.database import dispose_engine, initialize_database
from books_api.infrastructure.common.error_handlers import register_exception_handlers
from books_api.infrastructure.common.routers import health
from books_api.infrastructure.library.routers import authors, books

logger = structlog.get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    """Build the application for the given settings."""
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "starting_application",
            project=settings.PROJECT_NAME,
            version=settings.VERSION,
            environment=settings.ENVIRONMENT,
        )
        initialize_database(settings)

        yield

        logger.info("shutting_down_application")
        dispose_engine()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(books.router, prefix=settings.API_PREFIX)
    app.include_router(authors.router, prefix=settings.API_PREFIX)

    return app


app = create_app(get_settings())

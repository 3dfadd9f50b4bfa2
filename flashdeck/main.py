"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashdeck.config import Settings, configure_logging, get_settings
from flashdeck.database import create_tables, dispose_engine, initialize_database
from flashdeck.infrastructure.common.error_handlers import register_error_handlers
from flashdeck.infrastructure.common.routers import health
from flashdeck.infrastructure.learning.routers import categories, flashcards, study_sessions

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the application."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        initialize_database(settings)
        if settings.DATABASE_URL.startswith("sqlite"):
            # Other backends are managed by Alembic migrations
            create_tables()
        logger.info(
            "application_started",
            project=settings.PROJECT_NAME,
            environment=settings.ENVIRONMENT,
        )
        yield
        dispose_engine()
        logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(health.build_root_router(settings))
    app.include_router(
        categories.router, prefix=f"{settings.API_V1_PREFIX}{settings.CATEGORIES_PATH}"
    )
    app.include_router(
        study_sessions.router, prefix=f"{settings.API_V1_PREFIX}{settings.STUDY_SESSIONS_PATH}"
    )
    app.include_router(
        flashcards.router, prefix=f"{settings.API_V1_PREFIX}{settings.FLASHCARDS_PATH}"
    )

    return app


app = create_app()

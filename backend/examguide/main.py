"""Exam Guide API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExamGuideError → structured JSON responses
    - CORS open to every origin configured from settings
    - Store handle created once in the lifespan and kept on app.state.store;
      a failed connection leaves the app running and every data route answers 503

Design Decisions:
    - Lifespan over @app.on_event for startup/shutdown
    - create_app() factory so tests build the app without running the lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from examguide.api.error_handlers import register_error_handlers
from examguide.api.routes import classification, health, unique_exams
from examguide.config import Settings, get_settings
from examguide.infrastructure.database import ExamStore
from examguide.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


async def _open_store(settings: Settings) -> ExamStore | None:
    try:
        store = ExamStore.from_url(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    except (SQLAlchemyError, ImportError) as e:
        logger.error(f"Could not create database engine: {e}")
        return None
    await store.connect(create_schema=settings.create_schema_on_startup)
    return store


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        app.state.store = await _open_store(settings)
        if app.state.store is None or not app.state.store.ready:
            logger.error("Database unavailable; data endpoints will return 503")
        logger.info("Exam Guide API started")
        yield
        if app.state.store is not None:
            await app.state.store.dispose()
        logger.info("Exam Guide API shutting down")

    app = FastAPI(
        title="Exam Guide API", version="1.0.0", lifespan=lifespan,
    )
    app.state.store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(classification.router)
    app.include_router(unique_exams.router)

    register_error_handlers(app)
    return app


app = create_app()

"""Exam Store Handle: async engine, session factory, readiness flag and error mapping.

Invariants:
    - One ExamStore per process, created in the FastAPI lifespan and kept on app.state
    - ready is False until connect() has reached the database at least once
    - Every session auto-rolls-back on a SQLAlchemy exception and re-raises it as StoreError
    - Handlers obtain the store only through get_store(), which refuses unready handles

Design Decisions:
    - Explicit handle injected with Depends instead of a module-level singleton
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from examguide.core.errors import ServiceUnavailableError, StoreError
from examguide.db.base import Base

logger = logging.getLogger(__name__)


class ExamStore:
    """Process-wide store handle with pooling, rollback, and health checks."""

    def __init__(self, engine: AsyncEngine, ready: bool = False):
        self.engine = engine
        self.ready = ready
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(
        cls, database_url: str, pool_size: int = 10, max_overflow: int = 5,
    ) -> "ExamStore":
        if database_url.startswith("sqlite"):
            engine = create_async_engine(database_url)
        else:
            engine = create_async_engine(
                database_url,
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        return cls(engine)

    async def connect(self, create_schema: bool = False) -> bool:
        """Reach the database once; mark the handle ready on success."""
        try:
            async with self.engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
                if create_schema:
                    await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database connection failed: {e}")
            self.ready = False
            return False
        self.ready = True
        logger.info("Connected to database")
        return True

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise StoreError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StoreError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StoreError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for the readiness check)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except StoreError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        self.ready = False
        await self.engine.dispose()


def get_store(request: Request) -> ExamStore:
    """FastAPI dependency: the ready store handle, or 503 before any store access."""
    store: ExamStore | None = getattr(request.app.state, "store", None)
    if store is None or not store.ready:
        raise ServiceUnavailableError()
    return store

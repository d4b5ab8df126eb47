"""Service test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app's store handle is swapped on app.state and restored afterwards
    - unready_client and broken_client cover the 503 and 500 paths

Design Decisions:
    - SQLite in-memory: fast, no external dependency; ON CONFLICT and RETURNING
      behave the same as on PostgreSQL for the statements used here
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from examguide.db.base import Base
from examguide.infrastructure.database import ExamStore
from examguide.main import app
import examguide.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_store(test_engine):
    return ExamStore(test_engine, ready=True)


async def _client_with_store(store):
    original_store = getattr(app.state, "store", None)
    app.state.store = store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.store = original_store


@pytest.fixture
async def client(test_store):
    """FastAPI test client backed by a ready in-memory store."""
    async for c in _client_with_store(test_store):
        yield c


@pytest.fixture
async def unready_client(test_engine):
    """Store exists but never finished connecting."""
    async for c in _client_with_store(ExamStore(test_engine, ready=False)):
        yield c


@pytest.fixture
async def broken_client():
    """Store marked ready, but its tables do not exist: every query fails."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async for c in _client_with_store(ExamStore(engine, ready=True)):
        yield c
    await engine.dispose()

"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Settings never point at real infrastructure (SQLite, in-process cache, no tax-ID service)
    - Every test that asks for a database gets a fresh in-memory SQLite schema
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CACHE_BACKEND", "memory")
os.environ.setdefault("TAX_ID_SERVICE_URL", "")
os.environ.setdefault("LOG_FORMAT", "text")

from baseapi.db.base import Base  # noqa: E402
from baseapi.db.session import create_session_factory  # noqa: E402
import baseapi.models  # noqa: E402,F401


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
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session

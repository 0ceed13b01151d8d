"""Service test fixtures — seeded catalog, in-process cache, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database (root conftest)
    - get_db, get_cache_store, get_status_repository, get_tax_id_calculator overridden
    - db_manager patched so the readiness probe checks the test database
    - The tax-ID service is "down" by default (raises), so creation uses the local formula

Design Decisions:
    - ASGITransport does not run the lifespan: every singleton the routes need is overridden
"""

import pytest
from httpx import ASGITransport, AsyncClient

from baseapi.api.dependencies import (
    get_cache_store, get_status_repository, get_tax_id_calculator,
)
from baseapi.core.errors import ExternalServiceError
from baseapi.infrastructure import database as db_module
from baseapi.infrastructure.cache import InMemoryCacheStore
from baseapi.infrastructure.database import DatabaseSessionManager, get_db
from baseapi.infrastructure.status_repository import (
    InMemoryExampleStatusRepository, default_statuses,
)
from baseapi.main import app

from tests.services.fakes import FakeTaxIdCalculator


@pytest.fixture
async def seeded_status_repository():
    repository = InMemoryExampleStatusRepository()
    await repository.seed(default_statuses())
    return repository


@pytest.fixture
def memory_cache():
    return InMemoryCacheStore(default_ttl=600)


@pytest.fixture
def tax_id_service_down():
    return FakeTaxIdCalculator(error=ExternalServiceError("connection refused"))


@pytest.fixture
async def client(
    test_engine, test_session_factory, seeded_status_repository,
    memory_cache, tax_id_service_down,
):
    """FastAPI test client with every infrastructure dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache_store] = lambda: memory_cache
    app.dependency_overrides[get_status_repository] = lambda: seeded_status_repository
    app.dependency_overrides[get_tax_id_calculator] = lambda: tax_id_service_down

    previous_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = previous_manager

"""API Dependencies — FastAPI providers that wire adapters into services.

Invariants:
    - Singletons (cache, status repository, tax-ID client) are read at request
      time from their modules, so the lifespan can replace them after import
    - Each request gets its own ExampleService bound to its own AsyncSession
    - Tests override get_cache_store/get_status_repository/get_tax_id_calculator/get_db

Design Decisions:
    - Module attribute lookups (cache_module.cache_store) over from-imports:
      a from-import would freeze the None placeholder seen at import time
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from baseapi.config import get_settings
from baseapi.core.repository_protocols import (
    CacheStore, ExampleStatusRepository, TaxIdCalculator,
)
from baseapi.infrastructure import cache as cache_module
from baseapi.infrastructure import database as db_module
from baseapi.infrastructure import status_repository as status_module
from baseapi.infrastructure import tax_id_client as tax_id_module
from baseapi.infrastructure.database import get_db
from baseapi.infrastructure.example_repository import SqlAlchemyExampleRepository
from baseapi.services.example_service import ExampleService
from baseapi.services.example_status_service import ExampleStatusService
from baseapi.services.health_service import HealthCheckService


def get_cache_store() -> CacheStore:
    if cache_module.cache_store is None:
        raise RuntimeError("Cache not initialized")
    return cache_module.cache_store


def get_status_repository() -> ExampleStatusRepository:
    if status_module.status_repository is None:
        raise RuntimeError("Status repository not initialized")
    return status_module.status_repository


def get_tax_id_calculator() -> TaxIdCalculator | None:
    return tax_id_module.tax_id_client


def get_example_service(
    db: AsyncSession = Depends(get_db),
    tax_id_calculator: TaxIdCalculator | None = Depends(get_tax_id_calculator),
) -> ExampleService:
    settings = get_settings()
    return ExampleService(
        SqlAlchemyExampleRepository(db),
        tax_id_calculator,
        tax_id_timeout_seconds=settings.tax_id_timeout_seconds,
    )


def get_example_status_service(
    repository: ExampleStatusRepository = Depends(get_status_repository),
    cache: CacheStore = Depends(get_cache_store),
) -> ExampleStatusService:
    settings = get_settings()
    return ExampleStatusService(
        repository, cache, cache_ttl_seconds=settings.cache_ttl_seconds,
    )


async def _database_probe() -> bool:
    manager = db_module.db_manager
    return await manager.health_check() if manager else False


def get_health_service(
    cache: CacheStore = Depends(get_cache_store),
) -> HealthCheckService:
    settings = get_settings()
    return HealthCheckService(
        application=settings.app_name,
        version=settings.app_version,
        database_probe=_database_probe,
        cache_probe=cache.ping,
    )

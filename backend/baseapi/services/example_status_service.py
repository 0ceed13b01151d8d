"""Example Status Service — cache-aside lookups over the status catalog.

Invariants:
    - None, empty, or whitespace-only ids return None without touching either store
    - Cache hit short-circuits: the repository is not consulted
    - Cache miss reads the repository; found → cache fill with the fixed TTL, absent → no write
    - Cache errors never reach the caller: a failed get is a miss, a failed put is a no-op
    - The service never writes to the repository
    - Bulk listings bypass the cache entirely and keep repository order

Design Decisions:
    - Cache calls are guarded here as well as in the adapters: the service stays
      correct even with a CacheStore that breaks its never-raise contract
    - No invalidation path: the catalog has no write operation. A future status
      write must call cache.evict(id) after the repository write
"""

import logging
from typing import Sequence

from baseapi.core.domain_models import ExampleStatus
from baseapi.core.domain_types import StatusId
from baseapi.core.repository_protocols import CacheStore, ExampleStatusRepository

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 600


class ExampleStatusService:
    """Read-only access to the status catalog with a cache-aside point lookup."""

    def __init__(
        self,
        repository: ExampleStatusRepository,
        cache: CacheStore,
        cache_ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
    ):
        self.repository = repository
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    async def get_status_by_id(self, status_id: StatusId | None) -> ExampleStatus | None:
        if status_id is None or not status_id.strip():
            logger.warning(f"Invalid status id provided: {status_id!r}")
            return None

        cached = await self._cache_get(status_id)
        if cached is not None:
            logger.debug("Status served from cache", extra={"status_id": status_id})
            return cached

        status = await self.repository.find_by_id(status_id)
        if status is None:
            logger.debug("Status not found", extra={"status_id": status_id})
            return None

        await self._cache_put(status_id, status)
        return status

    async def list_all_statuses(self) -> Sequence[ExampleStatus]:
        statuses = await self.repository.find_all()
        logger.debug(f"Found {len(statuses)} example statuses")
        return statuses

    async def list_active_statuses(self) -> Sequence[ExampleStatus]:
        statuses = await self.repository.find_all_active()
        logger.debug(f"Found {len(statuses)} active example statuses")
        return statuses

    async def _cache_get(self, status_id: StatusId) -> ExampleStatus | None:
        try:
            return await self.cache.get(status_id)
        except Exception as e:
            logger.error(
                f"Cache read failed, treating as miss: {e}",
                extra={"status_id": status_id},
            )
            return None

    async def _cache_put(self, status_id: StatusId, status: ExampleStatus) -> None:
        try:
            await self.cache.put(status_id, status, self.cache_ttl_seconds)
        except Exception as e:
            logger.error(
                f"Cache write failed, continuing without cache: {e}",
                extra={"status_id": status_id},
            )

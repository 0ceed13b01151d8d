"""Health Service — liveness snapshot and readiness checks.

Invariants:
    - get_health_status() always reports "UP" when the process can answer
    - Readiness fails only on the database; the cache is reported, never required
"""

import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable

from baseapi.core.domain_models import HealthStatus

logger = logging.getLogger(__name__)

Probe = Callable[[], Awaitable[bool]]


class HealthCheckService:
    """Builds health responses from application metadata and dependency probes."""

    def __init__(
        self,
        application: str,
        version: str,
        database_probe: Probe | None = None,
        cache_probe: Probe | None = None,
    ):
        self.application = application
        self.version = version
        self.database_probe = database_probe
        self.cache_probe = cache_probe

    def get_health_status(self) -> HealthStatus:
        logger.debug("Health check requested")
        return HealthStatus(
            status="UP",
            timestamp=datetime.now(timezone.utc),
            version=self.version,
            application=self.application,
        )

    async def check_readiness(self) -> tuple[bool, dict[str, str]]:
        """Return (ready, per-dependency state)."""
        db_ok = await self.database_probe() if self.database_probe else False
        cache_ok = await self.cache_probe() if self.cache_probe else False
        checks = {
            "database": "healthy" if db_ok else "unavailable",
            "cache": "healthy" if cache_ok else "degraded",
        }
        return db_ok, checks

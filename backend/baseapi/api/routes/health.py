"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health always returns 200 with status "UP" if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the database is unreachable (readiness)
    - An unreachable cache is reported as "degraded" but never fails readiness

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from baseapi.api.dependencies import get_health_service
from baseapi.schemas.health import HealthCheckResponse, ReadinessResponse
from baseapi.services.health_service import HealthCheckService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(
    service: HealthCheckService = Depends(get_health_service),
):
    """Basic liveness probe."""
    health = service.get_health_status()
    return HealthCheckResponse(
        status=health.status,
        timestamp=health.timestamp,
        version=health.version,
        application=health.application,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    service: HealthCheckService = Depends(get_health_service),
):
    """Readiness probe — database connectivity plus cache state."""
    ready, checks = await service.check_readiness()
    if not ready:
        logger.warning(f"Readiness check failed: {checks}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return ReadinessResponse(status="ready", checks=checks)

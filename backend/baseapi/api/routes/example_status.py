"""Example Status Routes — read-only catalog with cached point lookups.

Invariants:
    - /active is declared before /{status_id} so it is not captured as an id
    - Point lookups go through the cache-aside service; listings read the store
"""

import logging

from fastapi import APIRouter, Depends

from baseapi.api.dependencies import get_example_status_service
from baseapi.core.domain_types import StatusId
from baseapi.core.errors import ResourceNotFoundError
from baseapi.schemas.example_status import ExampleStatusResponse
from baseapi.services.example_status_service import ExampleStatusService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/example-status", tags=["example-status"])


@router.get("", response_model=list[ExampleStatusResponse])
async def list_statuses(
    service: ExampleStatusService = Depends(get_example_status_service),
):
    """All catalog entries."""
    statuses = await service.list_all_statuses()
    return [ExampleStatusResponse.from_domain(s) for s in statuses]


@router.get("/active", response_model=list[ExampleStatusResponse])
async def list_active_statuses(
    service: ExampleStatusService = Depends(get_example_status_service),
):
    """Only active catalog entries."""
    statuses = await service.list_active_statuses()
    return [ExampleStatusResponse.from_domain(s) for s in statuses]


@router.get("/{status_id}", response_model=ExampleStatusResponse)
async def get_status(
    status_id: str,
    service: ExampleStatusService = Depends(get_example_status_service),
):
    """One catalog entry by id (served from cache when present)."""
    found = await service.get_status_by_id(StatusId(status_id))
    if found is None:
        raise ResourceNotFoundError("ExampleStatus", status_id)
    return ExampleStatusResponse.from_domain(found)

"""Example Routes — create and look up Example records.

Invariants:
    - POST returns 201 with the stored record (id, tax_id, timestamps)
    - Duplicate national ID → 409 DUPLICATE_KEY (raised by ExampleService)
    - Lookups that find nothing → 404 RESOURCE_NOT_FOUND
"""

import logging

from fastapi import APIRouter, Depends, status

from baseapi.api.dependencies import get_example_service
from baseapi.core.domain_types import ExampleId, NationalId
from baseapi.core.errors import ResourceNotFoundError
from baseapi.schemas.example import ExampleCreate, ExampleResponse
from baseapi.services.example_service import ExampleService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/examples", tags=["examples"])


@router.post(
    "", response_model=ExampleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_example(
    body: ExampleCreate,
    service: ExampleService = Depends(get_example_service),
):
    """Create a new example. The national ID must be unique."""
    created = await service.create_example(body.to_domain())
    return ExampleResponse.from_domain(created)


@router.get("", response_model=list[ExampleResponse])
async def list_examples(
    service: ExampleService = Depends(get_example_service),
):
    """List all examples in creation order."""
    return [ExampleResponse.from_domain(e) for e in await service.list_examples()]


@router.get("/national-id/{national_id}", response_model=ExampleResponse)
async def get_example_by_national_id(
    national_id: str,
    service: ExampleService = Depends(get_example_service),
):
    """Find an example by its national ID."""
    example = await service.find_example_by_national_id(NationalId(national_id))
    if example is None:
        raise ResourceNotFoundError("Example", national_id)
    return ExampleResponse.from_domain(example)


@router.get("/{example_id}", response_model=ExampleResponse)
async def get_example(
    example_id: int,
    service: ExampleService = Depends(get_example_service),
):
    """Find an example by its store-assigned id."""
    example = await service.find_example_by_id(ExampleId(example_id))
    if example is None:
        raise ResourceNotFoundError("Example", str(example_id))
    return ExampleResponse.from_domain(example)

"""Example Service — duplicate-guarded creation with external tax-ID derivation.

Invariants:
    - create_example order: existence check → tax-ID derivation → persist
    - Duplicate national ID raises DuplicateKeyError before any external call or write
    - Exactly one save() per successful creation; at most one remote derivation call
    - created_at == updated_at at creation (single UTC timestamp)
    - Caller-supplied id, tax_id, and timestamps on the candidate are ignored

Design Decisions:
    - The pre-check is a fast, clear failure, not the enforcement point: under
      concurrent writers the repository's unique constraint raises DuplicateKeyError
      on save(), which propagates unchanged
    - Derivation always goes through FallbackTaxIdCalculator, so a down service
      never aborts creation
    - Example lookups are not cached (only the status catalog is)
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Sequence

from baseapi.core.domain_models import Example
from baseapi.core.domain_types import ExampleId, NationalId
from baseapi.core.errors import DuplicateKeyError
from baseapi.core.repository_protocols import ExampleRepository, TaxIdCalculator
from baseapi.services.tax_id_resolution import FallbackTaxIdCalculator

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExampleService:
    """Create and look up Example records."""

    def __init__(
        self,
        repository: ExampleRepository,
        tax_id_calculator: TaxIdCalculator | None = None,
        tax_id_timeout_seconds: float | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.repository = repository
        if isinstance(tax_id_calculator, FallbackTaxIdCalculator):
            self.tax_ids = tax_id_calculator
        else:
            self.tax_ids = FallbackTaxIdCalculator(
                tax_id_calculator, timeout_seconds=tax_id_timeout_seconds,
            )
        self.clock = clock

    async def create_example(self, candidate: Example) -> Example:
        """Persist a new Example; raises DuplicateKeyError if the national ID is taken."""
        national_id = candidate.national_id
        logger.info("Creating example", extra={"national_id": national_id})

        if await self.repository.exists_by_national_id(national_id):
            logger.warning(
                "Example with this national ID already exists",
                extra={"national_id": national_id},
            )
            raise DuplicateKeyError(national_id)

        tax_id = await self.tax_ids.derive(national_id, candidate.gender)

        now = self.clock()
        example = replace(
            candidate, id=None, tax_id=tax_id, created_at=now, updated_at=now,
        )
        saved = await self.repository.save(example)
        logger.info(
            f"Example created with id {saved.id}",
            extra={"national_id": national_id, "example_id": saved.id},
        )
        return saved

    async def find_example_by_national_id(self, national_id: NationalId) -> Example | None:
        logger.info("Finding example by national ID", extra={"national_id": national_id})
        return await self.repository.find_by_national_id(national_id)

    async def find_example_by_id(self, example_id: ExampleId) -> Example | None:
        return await self.repository.find_by_id(example_id)

    async def list_examples(self) -> Sequence[Example]:
        return await self.repository.find_all()

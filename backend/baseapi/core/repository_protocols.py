"""Boundary Protocols — contracts between core services and infrastructure adapters.

Invariants:
    - Services NEVER import adapters — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - CacheStore methods never raise: failures degrade to None / no-op / False
    - ExampleRepository.save raises DuplicateKeyError when the storage-level
      uniqueness constraint rejects the write (authoritative under concurrency)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from typing import Protocol, Sequence

from baseapi.core.domain_models import Example, ExampleStatus
from baseapi.core.domain_types import ExampleId, Gender, NationalId, StatusId, TaxId


class ExampleRepository(Protocol):
    """Durable store for Example records — implemented by infrastructure."""
    async def save(self, example: Example) -> Example: ...
    async def find_by_id(self, example_id: ExampleId) -> Example | None: ...
    async def find_by_national_id(self, national_id: NationalId) -> Example | None: ...
    async def find_all(self) -> Sequence[Example]: ...
    async def exists_by_national_id(self, national_id: NationalId) -> bool: ...


class ExampleStatusRepository(Protocol):
    """Durable store for the status catalog. save() is used only for seeding."""
    async def find_by_id(self, status_id: StatusId) -> ExampleStatus | None: ...
    async def find_all(self) -> Sequence[ExampleStatus]: ...
    async def find_all_active(self) -> Sequence[ExampleStatus]: ...
    async def save(self, status: ExampleStatus) -> ExampleStatus: ...


class CacheStore(Protocol):
    """Best-effort key/value cache with per-entry expiry. Never a source of truth."""
    async def get(self, key: str) -> ExampleStatus | None: ...
    async def put(
        self, key: str, value: ExampleStatus, ttl_seconds: int | None = None,
    ) -> None: ...
    async def evict(self, key: str) -> None: ...
    async def clear(self) -> None: ...
    async def exists(self, key: str) -> bool: ...
    async def ping(self) -> bool: ...


class TaxIdCalculator(Protocol):
    """Derives a tax identifier from national ID and gender. May raise."""
    async def derive(self, national_id: NationalId, gender: Gender) -> TaxId: ...

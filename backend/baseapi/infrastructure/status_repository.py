"""Status Repository — in-process implementation of the ExampleStatusRepository port.

Invariants:
    - Catalog ids are unique (save() replaces by id)
    - find_all() and find_all_active() preserve insertion order
    - Seeded exactly once per process in the lifespan via init_status_repository()

Design Decisions:
    - In-process dict over a table: the catalog is fixed reference data, read-mostly
    - Module-level singleton mirrors db_manager; FastAPI dependency reads it at request time
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Sequence

from baseapi.core.domain_models import ExampleStatus
from baseapi.core.domain_types import StatusId

logger = logging.getLogger(__name__)


def default_statuses(now: datetime | None = None) -> list[ExampleStatus]:
    """Fixed catalog seeded at startup."""
    now = now or datetime.now(timezone.utc)
    return [
        ExampleStatus(
            id=StatusId("1"), name="Service A", status="RUNNING",
            description="Primary service running normally",
            created_at=now - timedelta(days=10), active=True,
        ),
        ExampleStatus(
            id=StatusId("2"), name="Service B", status="IDLE",
            description="Secondary service in idle state",
            created_at=now - timedelta(days=5), active=True,
        ),
        ExampleStatus(
            id=StatusId("3"), name="Service C", status="STOPPED",
            description="Maintenance service currently stopped",
            created_at=now - timedelta(days=2), active=False,
        ),
    ]


class InMemoryExampleStatusRepository:
    """Dict-backed status catalog."""

    def __init__(self):
        self._storage: dict[str, ExampleStatus] = {}

    async def find_by_id(self, status_id: StatusId) -> ExampleStatus | None:
        logger.debug(
            f"Finding example status by id: {status_id}",
            extra={"status_id": status_id},
        )
        return self._storage.get(status_id)

    async def find_all(self) -> Sequence[ExampleStatus]:
        return list(self._storage.values())

    async def find_all_active(self) -> Sequence[ExampleStatus]:
        return [s for s in self._storage.values() if s.active]

    async def save(self, status: ExampleStatus) -> ExampleStatus:
        self._storage[status.id] = status
        return status

    async def seed(self, statuses: Sequence[ExampleStatus]) -> None:
        for status in statuses:
            await self.save(status)
        logger.info(f"Initialized {len(self._storage)} example statuses")


# Singleton (initialized on startup)
status_repository: InMemoryExampleStatusRepository | None = None


async def init_status_repository() -> InMemoryExampleStatusRepository:
    global status_repository
    repository = InMemoryExampleStatusRepository()
    await repository.seed(default_statuses())
    status_repository = repository
    return repository

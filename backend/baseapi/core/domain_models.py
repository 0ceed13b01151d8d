"""Domain Models — framework-independent records passed between services and ports.

Invariants:
    - Example.id is None until the store assigns it on first persist
    - A persisted Example always carries tax_id, created_at, and updated_at
    - ExampleStatus.to_dict()/from_dict() round-trip through JSON (cache payloads)
    - ExampleStatus is frozen: in-process stores and caches hand out shared instances

Design Decisions:
    - Plain dataclasses over ORM objects: services never see SQLAlchemy state
    - Gender stored as the Gender enum; from_dict accepts the raw code
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from baseapi.core.domain_types import ExampleId, Gender, NationalId, StatusId, TaxId


@dataclass
class Example:
    """Person-like record identified by a unique national ID."""
    first_name: str
    last_name: str
    national_id: NationalId
    gender: Gender
    tax_id: TaxId | None = None
    id: ExampleId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ExampleStatus:
    """Immutable catalog entry; the unit cached by the status lookup."""
    id: StatusId
    name: str
    status: str
    description: str
    created_at: datetime
    active: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExampleStatus":
        return cls(
            id=StatusId(str(data["id"])),
            name=data["name"],
            status=data["status"],
            description=data["description"],
            created_at=datetime.fromisoformat(data["created_at"]),
            active=bool(data["active"]),
        )


@dataclass
class HealthStatus:
    """Liveness snapshot returned by the health probe."""
    status: str
    timestamp: datetime
    version: str
    application: str

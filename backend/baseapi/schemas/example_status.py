"""Example Status Schemas — public view of catalog entries."""

from datetime import datetime

from pydantic import BaseModel

from baseapi.core.domain_models import ExampleStatus


class ExampleStatusResponse(BaseModel):
    id: str
    name: str
    status: str
    description: str
    created_at: datetime
    active: bool

    @classmethod
    def from_domain(cls, status: ExampleStatus) -> "ExampleStatusResponse":
        return cls(
            id=status.id,
            name=status.name,
            status=status.status,
            description=status.description,
            created_at=status.created_at,
            active=status.active,
        )

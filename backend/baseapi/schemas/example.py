"""Example Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - first_name/last_name: 2-100 chars, stripped, non-blank
    - national_id: 7 or 8 digits
    - gender: "H" or "M"
    - Responses never expose ORM objects (built from core dataclasses)
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from baseapi.core.domain_models import Example
from baseapi.core.domain_types import NATIONAL_ID_PATTERN, Gender, NationalId


class ExampleCreate(BaseModel):
    """Example creation request — tax ID and timestamps are never accepted."""
    first_name: str = Field(min_length=2, max_length=100)
    last_name: str = Field(min_length=2, max_length=100)
    national_id: str = Field(pattern=NATIONAL_ID_PATTERN.pattern)
    gender: Gender

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("name must have at least 2 non-blank characters")
        return v

    def to_domain(self) -> Example:
        return Example(
            first_name=self.first_name,
            last_name=self.last_name,
            national_id=NationalId(self.national_id),
            gender=self.gender,
        )


class ExampleResponse(BaseModel):
    """Stored Example as returned to clients."""
    id: int
    first_name: str
    last_name: str
    national_id: str
    gender: Gender
    tax_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, example: Example) -> "ExampleResponse":
        return cls(
            id=example.id,
            first_name=example.first_name,
            last_name=example.last_name,
            national_id=example.national_id,
            gender=example.gender,
            tax_id=example.tax_id,
            created_at=example.created_at,
            updated_at=example.updated_at,
        )

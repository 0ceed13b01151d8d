"""Example ORM — persisted person-like record keyed by a unique national ID.

Invariants:
    - id is an autoincrement integer primary key, assigned on first flush
    - national_id is unique (uq_examples_national_id) — the authoritative
      duplicate guard when concurrent writers race past the service pre-check
    - tax_id, created_at, updated_at are non-nullable (set before the first persist)

Design Decisions:
    - Named unique constraint: the repository recognizes it when mapping IntegrityError
    - gender stored as its one-letter code
"""

from datetime import datetime

from sqlalchemy import String, Integer, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from baseapi.db.base import Base

NATIONAL_ID_CONSTRAINT = "uq_examples_national_id"


class ExampleRecord(Base):
    """Row in the examples table."""
    __tablename__ = "examples"
    __table_args__ = (
        UniqueConstraint("national_id", name=NATIONAL_ID_CONSTRAINT),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    national_id: Mapped[str] = mapped_column(String(8), nullable=False)
    gender: Mapped[str] = mapped_column(String(1), nullable=False)
    tax_id: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

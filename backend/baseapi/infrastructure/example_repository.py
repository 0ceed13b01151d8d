"""Example Repository — SQLAlchemy implementation of the ExampleRepository port.

Invariants:
    - save() commits and returns a new domain object carrying the assigned id
    - A unique-constraint violation on national_id raises DuplicateKeyError
      (storage is the final authority; the service pre-check only fails fast)
    - Reads never mutate state; find_all() returns rows in id order

Design Decisions:
    - Repository owns the commit: one save() is one transaction
    - ORM rows never leave this module; callers only see core dataclasses
"""

import logging
from typing import Sequence

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from baseapi.core.domain_models import Example
from baseapi.core.domain_types import ExampleId, Gender, NationalId
from baseapi.core.errors import DatabaseError, DuplicateKeyError
from baseapi.models.example import ExampleRecord

logger = logging.getLogger(__name__)


def _is_national_id_violation(exc: IntegrityError) -> bool:
    # Postgres names the constraint; SQLite names the column ("examples.national_id")
    return "national_id" in str(exc.orig)


def to_domain(record: ExampleRecord) -> Example:
    return Example(
        id=ExampleId(record.id),
        first_name=record.first_name,
        last_name=record.last_name,
        national_id=NationalId(record.national_id),
        gender=Gender(record.gender),
        tax_id=record.tax_id,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def to_record(example: Example) -> ExampleRecord:
    return ExampleRecord(
        id=example.id,
        first_name=example.first_name,
        last_name=example.last_name,
        national_id=example.national_id,
        gender=Gender(example.gender).value,
        tax_id=example.tax_id,
        created_at=example.created_at,
        updated_at=example.updated_at,
    )


class SqlAlchemyExampleRepository:
    """Persists Example records in the examples table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, example: Example) -> Example:
        record = to_record(example)
        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if _is_national_id_violation(e):
                logger.warning(
                    "Storage rejected duplicate national ID",
                    extra={"national_id": example.national_id},
                )
                raise DuplicateKeyError(example.national_id) from e
            logger.error(f"DB integrity error saving example: {e}")
            raise DatabaseError("Integrity constraint violated", "commit") from e
        logger.debug(
            f"Example saved with id {record.id}",
            extra={"example_id": record.id},
        )
        return to_domain(record)

    async def find_by_id(self, example_id: ExampleId) -> Example | None:
        record = await self.db.get(ExampleRecord, example_id)
        return to_domain(record) if record else None

    async def find_by_national_id(self, national_id: NationalId) -> Example | None:
        result = await self.db.execute(
            select(ExampleRecord).where(ExampleRecord.national_id == national_id),
        )
        record = result.scalar_one_or_none()
        return to_domain(record) if record else None

    async def find_all(self) -> Sequence[Example]:
        result = await self.db.execute(
            select(ExampleRecord).order_by(ExampleRecord.id),
        )
        return [to_domain(r) for r in result.scalars().all()]

    async def exists_by_national_id(self, national_id: NationalId) -> bool:
        result = await self.db.execute(
            select(exists().where(ExampleRecord.national_id == national_id)),
        )
        return bool(result.scalar())

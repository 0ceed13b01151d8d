"""Example Repository — SQLAlchemy persistence and the storage-level uniqueness guard.

Invariants:
    - save() assigns an id and returns a populated domain object
    - A second row with the same national ID raises DuplicateKeyError even
      when no service pre-check ran (the constraint is the final authority)
    - exists/find reflect committed rows
"""

from datetime import datetime, timezone

import pytest

from baseapi.core.domain_models import Example
from baseapi.core.domain_types import Gender
from baseapi.core.errors import DuplicateKeyError
from baseapi.infrastructure.example_repository import SqlAlchemyExampleRepository

NOW = datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)


def _example(national_id: str = "12345678", gender: Gender = Gender.MALE) -> Example:
    return Example(
        first_name="Juan", last_name="Perez", national_id=national_id,
        gender=gender, tax_id=f"20-{national_id}-7",
        created_at=NOW, updated_at=NOW,
    )


@pytest.fixture
def repository(test_db):
    return SqlAlchemyExampleRepository(test_db)


async def test_save_assigns_id(repository):
    saved = await repository.save(_example())

    assert saved.id is not None
    assert saved.national_id == "12345678"
    assert saved.gender is Gender.MALE
    assert saved.tax_id == "20-12345678-7"


async def test_exists_by_national_id(repository):
    assert not await repository.exists_by_national_id("12345678")
    await repository.save(_example())
    assert await repository.exists_by_national_id("12345678")


async def test_unique_constraint_rejects_duplicate(repository, test_session_factory):
    await repository.save(_example())

    with pytest.raises(DuplicateKeyError) as exc_info:
        await repository.save(_example())

    assert exc_info.value.national_id == "12345678"
    async with test_session_factory() as other:
        rows = await SqlAlchemyExampleRepository(other).find_all()
    assert len(rows) == 1


async def test_session_usable_after_duplicate_rejection(repository):
    await repository.save(_example())
    with pytest.raises(DuplicateKeyError):
        await repository.save(_example())

    saved = await repository.save(_example("7654321", Gender.FEMALE))
    assert saved.id is not None


async def test_find_by_national_id_and_id(repository):
    saved = await repository.save(_example())

    by_nid = await repository.find_by_national_id("12345678")
    by_id = await repository.find_by_id(saved.id)

    assert by_nid.id == saved.id
    assert by_id.national_id == "12345678"
    assert await repository.find_by_national_id("00000000") is None
    assert await repository.find_by_id(9999) is None


async def test_find_all_in_id_order(repository):
    await repository.save(_example("2222222"))
    await repository.save(_example("1111111"))

    rows = await repository.find_all()

    assert [r.national_id for r in rows] == ["2222222", "1111111"]

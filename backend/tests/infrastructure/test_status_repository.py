"""Status Repository — seeded catalog contents and ordering."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from baseapi.core.domain_models import ExampleStatus
from baseapi.infrastructure import status_repository as status_module
from baseapi.infrastructure.status_repository import (
    InMemoryExampleStatusRepository, default_statuses, init_status_repository,
)


def test_default_catalog_has_two_active_and_one_inactive():
    statuses = default_statuses(datetime(2026, 1, 11, tzinfo=timezone.utc))

    assert [s.id for s in statuses] == ["1", "2", "3"]
    assert [s.active for s in statuses] == [True, True, False]
    assert statuses[0].created_at == datetime(2026, 1, 1, tzinfo=timezone.utc)


async def test_seeded_repository_lists_in_insertion_order():
    repository = InMemoryExampleStatusRepository()
    await repository.seed(default_statuses())

    assert [s.id for s in await repository.find_all()] == ["1", "2", "3"]
    assert [s.id for s in await repository.find_all_active()] == ["1", "2"]
    assert (await repository.find_by_id("3")).status == "STOPPED"
    assert await repository.find_by_id("4") is None


async def test_save_replaces_by_id():
    repository = InMemoryExampleStatusRepository()
    await repository.seed(default_statuses())
    replacement = ExampleStatus(
        id="2", name="Service B2", status="RUNNING", description="updated",
        created_at=datetime.now(timezone.utc), active=False,
    )

    await repository.save(replacement)

    assert len(await repository.find_all()) == 3
    assert [s.id for s in await repository.find_all_active()] == ["1"]


async def test_init_status_repository_sets_singleton(monkeypatch):
    monkeypatch.setattr(status_module, "status_repository", None)

    repository = await init_status_repository()

    assert status_module.status_repository is repository
    assert len(await repository.find_all()) == 3


async def test_callers_cannot_mutate_stored_statuses():
    repository = InMemoryExampleStatusRepository()
    await repository.seed(default_statuses())
    found = await repository.find_by_id("1")

    with pytest.raises(FrozenInstanceError):
        found.name = "renamed by caller"

    assert (await repository.find_by_id("1")).name == "Service A"

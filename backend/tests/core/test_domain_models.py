"""Domain Models — ExampleStatus JSON round-trip used by the cache."""

import json
from datetime import datetime, timezone

from baseapi.core.domain_models import ExampleStatus


def test_status_survives_json_round_trip():
    status = ExampleStatus(
        id="3", name="Service C", status="STOPPED",
        description="Maintenance service currently stopped",
        created_at=datetime(2026, 10, 15, 6, 30, tzinfo=timezone.utc),
        active=False,
    )

    restored = ExampleStatus.from_dict(json.loads(json.dumps(status.to_dict())))

    assert restored == status
    assert restored.created_at.tzinfo is not None


def test_status_id_is_normalized_to_catalog_key():
    restored = ExampleStatus.from_dict({
        "id": 3, "name": "Service C", "status": "STOPPED",
        "description": "stopped", "created_at": "2026-10-15T06:30:00+00:00",
        "active": 0,
    })

    assert restored.id == "3"
    assert restored.active is False

"""Example Routes — creation, duplicate rejection, validation, and lookups over HTTP.

Invariants:
    - POST /api/v1/examples returns 201 with id, tax_id, and equal timestamps
    - Second POST with the same national ID returns 409 and stores nothing
    - Invalid payloads return 400 VALIDATION_ERROR with field details
    - Unknown ids return 404 RESOURCE_NOT_FOUND

Design Decisions:
    - The tax-ID service is down in the client fixture, so tax IDs come from the local formula
"""

from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from baseapi.api.dependencies import get_example_service, get_tax_id_calculator
from baseapi.main import app
from baseapi.models.example import ExampleRecord

from tests.services.fakes import FakeTaxIdCalculator

PAYLOAD = {
    "first_name": "Juan",
    "last_name": "Perez",
    "national_id": "12345678",
    "gender": "H",
}


async def test_create_returns_201_with_local_tax_id(client):
    res = await client.post("/api/v1/examples", json=PAYLOAD)

    assert res.status_code == 201
    body = res.json()
    assert body["id"] >= 1
    assert body["tax_id"] == "20-12345678-7"
    assert body["gender"] == "H"
    assert body["created_at"] is not None
    assert body["created_at"] == body["updated_at"]


async def test_create_female_uses_female_formula(client):
    res = await client.post(
        "/api/v1/examples", json={**PAYLOAD, "national_id": "7654321", "gender": "M"},
    )
    assert res.status_code == 201
    assert res.json()["tax_id"] == "27-7654321-6"


async def test_create_uses_remote_tax_id_when_service_answers(client):
    app.dependency_overrides[get_tax_id_calculator] = (
        lambda: FakeTaxIdCalculator("20-12345678-4")
    )
    res = await client.post("/api/v1/examples", json=PAYLOAD)
    assert res.status_code == 201
    assert res.json()["tax_id"] == "20-12345678-4"


async def test_duplicate_national_id_returns_409_and_keeps_one_row(client, test_db):
    first = await client.post("/api/v1/examples", json=PAYLOAD)
    second = await client.post(
        "/api/v1/examples", json={**PAYLOAD, "first_name": "Otro"},
    )

    assert first.status_code == 201
    assert second.status_code == 409
    error = second.json()["error"]
    assert error["code"] == "DUPLICATE_KEY"
    assert error["category"] == "conflict"
    assert error["context"]["national_id"] == "12345678"

    count = await test_db.scalar(
        select(func.count()).select_from(ExampleRecord)
        .where(ExampleRecord.national_id == "12345678"),
    )
    assert count == 1


async def test_invalid_national_id_returns_400(client):
    res = await client.post(
        "/api/v1/examples", json={**PAYLOAD, "national_id": "12AB"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["category"] == "validation"
    assert any(d["field"].endswith("national_id") for d in error["details"])


async def test_invalid_gender_returns_400(client):
    res = await client.post("/api/v1/examples", json={**PAYLOAD, "gender": "X"})
    assert res.status_code == 400


async def test_blank_name_returns_400(client):
    res = await client.post("/api/v1/examples", json={**PAYLOAD, "first_name": "   "})
    assert res.status_code == 400


async def test_find_by_national_id(client):
    created = (await client.post("/api/v1/examples", json=PAYLOAD)).json()

    res = await client.get("/api/v1/examples/national-id/12345678")

    assert res.status_code == 200
    assert res.json()["id"] == created["id"]
    assert res.json()["tax_id"] == "20-12345678-7"


async def test_find_by_unknown_national_id_returns_404(client):
    res = await client.get("/api/v1/examples/national-id/99999999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_by_id_and_list(client):
    created = (await client.post("/api/v1/examples", json=PAYLOAD)).json()
    await client.post(
        "/api/v1/examples", json={**PAYLOAD, "national_id": "7654321", "gender": "M"},
    )

    one = await client.get(f"/api/v1/examples/{created['id']}")
    listed = await client.get("/api/v1/examples")

    assert one.status_code == 200
    assert one.json()["national_id"] == "12345678"
    assert [e["national_id"] for e in listed.json()] == ["12345678", "7654321"]


async def test_get_unknown_id_returns_404(client):
    res = await client.get("/api/v1/examples/424242")
    assert res.status_code == 404


class _BrokenExampleService:
    async def list_examples(self):
        raise RuntimeError("connection pool exhausted at 10.0.0.5")


async def test_unexpected_error_returns_generic_500():
    app.dependency_overrides[get_example_service] = lambda: _BrokenExampleService()
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            res = await c.get("/api/v1/examples")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert error["severity"] == "critical"
    assert "10.0.0.5" not in res.text

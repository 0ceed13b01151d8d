"""Tax-ID Client — request shape and failure mapping against httpx.MockTransport.

Invariants:
    - GET /api/cuit with dni and genero query params
    - Every failure mode raises ExternalServiceError (never a raw httpx error)
    - Only "NN-{dni}-N" answers are accepted; anything else falls back locally
"""

import httpx
import pytest

from baseapi.core.domain_types import Gender
from baseapi.core.errors import ExternalServiceError
from baseapi.infrastructure import tax_id_client as tax_id_module
from baseapi.infrastructure.tax_id_client import (
    RemoteTaxIdCalculator, init_tax_id_client,
)
from baseapi.services.tax_id_resolution import FallbackTaxIdCalculator


def _calculator(handler) -> RemoteTaxIdCalculator:
    client = httpx.AsyncClient(
        base_url="http://tax-id.test", transport=httpx.MockTransport(handler),
    )
    return RemoteTaxIdCalculator("http://tax-id.test", client=client)


async def test_derive_sends_dni_and_gender_and_returns_cuit():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200, json={"cuit": "20-12345678-3", "dni": "12345678", "genero": "H"},
        )

    calculator = _calculator(handler)

    assert await calculator.derive("12345678", Gender.MALE) == "20-12345678-3"
    assert seen == {
        "path": "/api/cuit",
        "params": {"dni": "12345678", "genero": "H"},
    }
    await calculator.aclose()


@pytest.mark.parametrize("response", [
    httpx.Response(500, text="boom"),
    httpx.Response(404, json={"error": "not found"}),
    httpx.Response(200, text="not json"),
    httpx.Response(200, json={"dni": "12345678"}),
    httpx.Response(200, json={"cuit": "   "}),
    httpx.Response(200, json=["20-12345678-3"]),
    httpx.Response(200, json={"cuit": "20-12345678-3-EXTRA-PADDING"}),
    httpx.Response(200, json={"cuit": "20123456783"}),
    httpx.Response(200, json={"cuit": "CUIT pending"}),
])
async def test_bad_responses_raise_external_service_error(response):
    calculator = _calculator(lambda request: response)

    with pytest.raises(ExternalServiceError):
        await calculator.derive("12345678", Gender.MALE)


async def test_connection_error_raises_external_service_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExternalServiceError) as exc_info:
        await _calculator(handler).derive("12345678", Gender.FEMALE)
    assert exc_info.value.context.national_id == "12345678"


async def test_timeout_raises_external_service_error():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(ExternalServiceError):
        await _calculator(handler).derive("12345678", Gender.MALE)


def test_empty_url_disables_remote_client(monkeypatch):
    monkeypatch.setattr(tax_id_module, "tax_id_client", None)
    assert init_tax_id_client("") is None
    assert tax_id_module.tax_id_client is None


async def test_surrounding_whitespace_is_trimmed():
    calculator = _calculator(
        lambda request: httpx.Response(200, json={"cuit": " 27-7654321-4 "}),
    )
    assert await calculator.derive("7654321", Gender.FEMALE) == "27-7654321-4"


async def test_oversized_answer_falls_back_to_local_formula():
    remote = _calculator(
        lambda request: httpx.Response(200, json={"cuit": "20-12345678-3" * 4}),
    )
    calculator = FallbackTaxIdCalculator(remote, timeout_seconds=1.0)

    assert await calculator.derive("12345678", Gender.MALE) == "20-12345678-7"
    await remote.aclose()

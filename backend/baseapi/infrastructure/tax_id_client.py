"""Tax-ID Service Client — httpx implementation of the TaxIdCalculator port.

Invariants:
    - One GET /api/cuit?dni=..&genero=.. per derive() call, no retries
    - Every request is bounded by the client timeout
    - Transport errors, timeouts, non-2xx responses, non-JSON bodies, and a
      missing, blank, or malformed "cuit" field all raise ExternalServiceError

Design Decisions:
    - Raises instead of falling back: the fallback lives in one place
      (services/tax_id_resolution.py), so this client stays a thin adapter
    - AsyncClient injected or owned: tests pass an httpx.MockTransport client
"""

import logging

import httpx

from baseapi.core.domain_types import TAX_ID_PATTERN, Gender, NationalId, TaxId
from baseapi.core.errors import ErrorContext, ExternalServiceError
from baseapi.core.tax_id import gender_code

logger = logging.getLogger(__name__)

TAX_ID_PATH = "/api/cuit"


class RemoteTaxIdCalculator:
    """Calls the external tax-ID calculation service."""

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.client = client or httpx.AsyncClient(
            base_url=base_url, timeout=timeout_seconds,
        )

    async def derive(self, national_id: NationalId, gender: Gender) -> TaxId:
        ctx = ErrorContext(national_id=national_id)
        params = {"dni": national_id, "genero": gender_code(gender)}
        try:
            response = await self.client.get(TAX_ID_PATH, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            raise ExternalServiceError(f"timeout: {e}", context=ctx) from e
        except httpx.HTTPStatusError as e:
            raise ExternalServiceError(
                f"HTTP {e.response.status_code}", context=ctx,
            ) from e
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"transport error: {e}", context=ctx) from e
        except ValueError as e:
            raise ExternalServiceError("response is not JSON", context=ctx) from e

        tax_id = payload.get("cuit") if isinstance(payload, dict) else None
        if not isinstance(tax_id, str) or not tax_id.strip():
            raise ExternalServiceError("response has no tax ID", context=ctx)
        tax_id = tax_id.strip()
        if not TAX_ID_PATTERN.match(tax_id):
            raise ExternalServiceError(
                f"response tax ID is malformed: {tax_id[:32]!r}", context=ctx,
            )
        logger.info(
            "Tax ID obtained from service", extra={"national_id": national_id},
        )
        return TaxId(tax_id)

    async def aclose(self) -> None:
        await self.client.aclose()


# Singleton (initialized on startup); None means local formula only
tax_id_client: RemoteTaxIdCalculator | None = None


def init_tax_id_client(
    base_url: str, timeout_seconds: float = 5.0,
) -> RemoteTaxIdCalculator | None:
    global tax_id_client
    tax_id_client = (
        RemoteTaxIdCalculator(base_url, timeout_seconds) if base_url else None
    )
    if tax_id_client is None:
        logger.info("Tax-ID service disabled; using local formula")
    return tax_id_client


async def close_tax_id_client() -> None:
    global tax_id_client
    if tax_id_client is not None:
        await tax_id_client.aclose()
        tax_id_client = None

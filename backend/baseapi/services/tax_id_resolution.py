"""Tax-ID Resolution — remote-first derivation with a transparent local fallback.

Invariants:
    - Primary calculator is called at most once per derive() (no retries)
    - The primary call is bounded by timeout_seconds (asyncio.wait_for)
    - Any exception or timeout from the primary yields the local formula value
    - Callers cannot tell a remote value from a local one; derive() never raises

Design Decisions:
    - Decorator over the TaxIdCalculator port: ExampleService sees one calculator
    - primary=None is valid (service disabled by config) and goes straight to local
"""

import asyncio
import logging

from baseapi.core.domain_types import Gender, NationalId, TaxId
from baseapi.core.repository_protocols import TaxIdCalculator
from baseapi.core.tax_id import calculate_tax_id_locally

logger = logging.getLogger(__name__)


class LocalTaxIdCalculator:
    """TaxIdCalculator backed by the deterministic local formula."""

    async def derive(self, national_id: NationalId, gender: Gender) -> TaxId:
        return calculate_tax_id_locally(national_id, gender)


class FallbackTaxIdCalculator:
    """Tries the primary calculator once, falls back to the local formula."""

    def __init__(
        self,
        primary: TaxIdCalculator | None,
        fallback: TaxIdCalculator | None = None,
        timeout_seconds: float | None = None,
    ):
        self.primary = primary
        self.fallback = fallback or LocalTaxIdCalculator()
        self.timeout_seconds = timeout_seconds

    async def derive(self, national_id: NationalId, gender: Gender) -> TaxId:
        if self.primary is None:
            return await self.fallback.derive(national_id, gender)
        try:
            return await asyncio.wait_for(
                self.primary.derive(national_id, gender),
                timeout=self.timeout_seconds,
            )
        except Exception as e:
            logger.warning(
                f"Tax-ID service failed, calculating locally: {type(e).__name__}: {e}",
                extra={"national_id": national_id},
            )
            return await self.fallback.derive(national_id, gender)

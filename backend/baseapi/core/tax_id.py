"""Local Tax-ID Formula — deterministic fallback when the tax-ID service is unavailable.

Invariants:
    - Male code ("H", case-insensitive) → "20-{national_id}-7"
    - Any other code → "27-{national_id}-6"
    - Pure: no IO, same input always yields the same output
"""

from baseapi.core.domain_types import Gender, NationalId, TaxId

MALE_PREFIX, MALE_SUFFIX = "20", "7"
FEMALE_PREFIX, FEMALE_SUFFIX = "27", "6"


def gender_code(gender: Gender | str) -> str:
    """Normalize a Gender or raw code to its upper-case wire value."""
    if isinstance(gender, Gender):
        return gender.value
    return str(gender).strip().upper()


def calculate_tax_id_locally(national_id: NationalId, gender: Gender | str) -> TaxId:
    """Wrap the national ID with the gender-specific prefix and check digit."""
    if gender_code(gender) == Gender.MALE.value:
        return TaxId(f"{MALE_PREFIX}-{national_id}-{MALE_SUFFIX}")
    return TaxId(f"{FEMALE_PREFIX}-{national_id}-{FEMALE_SUFFIX}")

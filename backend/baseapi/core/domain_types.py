"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ExampleId is the store-assigned surrogate key (int); StatusId is a catalog key (str)
    - NationalId is a 7–8 digit numeric string (checked at the API boundary)
    - TaxId is "NN-{national_id}-N" (checked on every remote answer)
    - Gender codes are exactly "H" (male) and "M" (female)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to the DB column without custom encoders
"""

import re
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ExampleId = NewType("ExampleId", int)
StatusId = NewType("StatusId", str)
NationalId = NewType("NationalId", str)
TaxId = NewType("TaxId", str)

NATIONAL_ID_PATTERN = re.compile(r"^[0-9]{7,8}$")
TAX_ID_PATTERN = re.compile(r"^[0-9]{2}-[0-9]{7,8}-[0-9]$")


# ─── Enums ───────────────────────────────────────────────────────

class Gender(str, Enum):
    """Gender code sent to the tax-ID service and used by the local formula."""
    MALE = "H"
    FEMALE = "M"

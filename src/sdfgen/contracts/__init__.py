"""Pipeline contracts and failure taxonomy.

This package enforces semantic guarantees between pipeline stages and
defines the exceptions every stage raises.

Key principle:
- Pydantic validates config correctness
- SdfError subclasses report bad input at the failing stage
- Contracts validate pipeline correctness
"""

from sdfgen.contracts.failure import (
    SdfError,
    InvalidInput,
    IOFailure,
    CorruptData,
    DegenerateField,
    ContractViolation,
)
from sdfgen.contracts.base import require
from sdfgen.contracts.mask import assert_mask
from sdfgen.contracts.field import assert_field
from sdfgen.contracts.image import assert_rendered

__all__ = [
    "SdfError",
    "InvalidInput",
    "IOFailure",
    "CorruptData",
    "DegenerateField",
    "ContractViolation",
    "require",
    "assert_mask",
    "assert_field",
    "assert_rendered",
]

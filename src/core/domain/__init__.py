"""
Domain models and value objects.

Contains the pydantic field type for Fixed.
"""

from src.core.domain.fixed_field import (
    FIXED_STRING_PATTERN,
    FixedDecimal,
    coerce_fixed,
    serialize_fixed,
)

__all__ = [
    "FIXED_STRING_PATTERN",
    "FixedDecimal",
    "coerce_fixed",
    "serialize_fixed",
]

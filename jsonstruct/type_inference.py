"""Map decoded JSON values to Go type labels.

Handles:
- Whole numbers inside the int32 range -> int
- Other numbers (fractional, out of range, non-finite) -> float64
- Strings -> string
- Objects, arrays, booleans, null -> ANY_TYPE
"""

from __future__ import annotations

import math
from typing import Any

INT_TYPE = "int"
FLOAT_TYPE = "float64"
STRING_TYPE = "string"

# Marker for JSON kinds without a generated Go type
ANY_TYPE = "any"

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _is_int32(value: int | float) -> bool:
    """Check that a number survives truncation to a 32-bit signed integer."""
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
    return INT32_MIN <= value <= INT32_MAX


def go_type(value: Any) -> str:
    """Resolve a decoded JSON value to a Go type string."""
    # bool subclasses int, so it has to be ruled out first
    if isinstance(value, bool):
        return ANY_TYPE
    if isinstance(value, (int, float)):
        return INT_TYPE if _is_int32(value) else FLOAT_TYPE
    if isinstance(value, str):
        return STRING_TYPE
    return ANY_TYPE

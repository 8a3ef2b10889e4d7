"""Fixed-width integer bounds shared by the parsers and the reducer."""

from __future__ import annotations

INT32_MIN: int = -(2**31)
"""Smallest value a token or running total may take."""

INT32_MAX: int = 2**31 - 1
"""Largest value a token or running total may take."""

UINT32_MAX: int = 2**32 - 1
"""Largest value a guess may take."""


def in_int32_range(value: int) -> bool:
    """Return ``True`` when *value* fits a 32-bit signed integer."""
    return INT32_MIN <= value <= INT32_MAX

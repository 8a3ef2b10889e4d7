"""Summation reducer with 32-bit signed overflow checking."""

from __future__ import annotations

from collections.abc import Iterable

from numplay.exceptions import SumOverflowError
from numplay.utils.limits import INT32_MAX, INT32_MIN, in_int32_range


def sum_numbers(numbers: Iterable[int]) -> int:
    """Return the sum of *numbers*, failing instead of wrapping.

    The running total is checked after every addition, so an
    intermediate overflow is reported even if later values would bring
    the total back into range.

    Raises
    ------
    SumOverflowError
        When the running total leaves ``[INT32_MIN, INT32_MAX]``.
    """
    total = 0
    for value in numbers:
        total += value
        if not in_int32_range(total):
            raise SumOverflowError(
                f"Sum overflows the 32-bit integer range "
                f"[{INT32_MIN}, {INT32_MAX}]",
                hint="Split the numbers into smaller batches.",
            )
    return total

"""Absolute values for floats and 32-bit integers, scalar and element-wise."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .model import INT32_MIN


def abs_float(x: float) -> float:
    """Return |x|; raise ValueError if x is NaN."""
    if math.isnan(x):
        raise ValueError("absolute value of NaN is undefined")
    return -x if x < 0 else x


def abs_int32(x: int) -> int:
    """Return |x|; raise OverflowError for INT32_MIN, whose magnitude has no int32 form."""
    if x == INT32_MIN:
        raise OverflowError("absolute value of INT32_MIN does not fit in 32 bits")
    return -x if x < 0 else x


def abs_floats(values: Iterable[float]) -> list[float]:
    """Return the absolute value of every element.

    Raises ValueError if there are no values or if any value is NaN.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot take absolute values of an empty sequence")
    return [abs_float(value) for value in items]


def abs_ints(values: Iterable[int]) -> list[int]:
    """Return the absolute value of every integer element.

    Raises ValueError if there are no values and OverflowError if any value
    is INT32_MIN.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot take absolute values of an empty sequence")
    return [abs_int32(value) for value in items]
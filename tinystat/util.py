"""Sorting, floating-point classification and array validation utilities."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence

from .compare import compare_ints

_VALID_UPPER = 1e100
_VALID_LOWER = 1e-100


def sort_floats(data: Iterable[float]) -> list[float]:
    """Return the values sorted in ascending order."""
    return sorted(data)


def sort_ints(data: Iterable[int]) -> list[int]:
    """Return the integers sorted in ascending order."""
    from functools import cmp_to_key

    return sorted(data, key=cmp_to_key(compare_ints))


def is_finite(value: float) -> bool:
    """Return True if value is neither infinite nor NaN."""
    return math.isfinite(value)


def is_normal(value: float) -> bool:
    """Return True if value is a normal float: not zero, subnormal, infinite or NaN."""
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def is_valid(value: float) -> bool:
    """Return True if value is finite and of a magnitude safe for statistics."""
    return (
        math.isfinite(value)
        and abs(value) < _VALID_UPPER
        and (abs(value) > _VALID_LOWER or value == 0.0)
    )


def all_valid(data: Iterable[float]) -> bool:
    """Return True if every value passes is_valid."""
    return all(is_valid(value) for value in data)


def is_sorted(data: Sequence[float]) -> bool:
    """Return True if no element is greater than the one after it."""
    return not any(prev > cur for prev, cur in zip(data, data[1:]))


def all_finite(data: Iterable[float]) -> bool:
    """Return True if every value is finite."""
    return all(math.isfinite(value) for value in data)


def replace_nan(data: Iterable[float], substitute: float) -> tuple[list[float], int]:
    """Return the values with NaNs replaced by substitute, and how many were replaced."""
    result: list[float] = []
    replaced = 0
    for value in data:
        if math.isnan(value):
            result.append(substitute)
            replaced += 1
        else:
            result.append(value)
    return result, replaced
"""Minimum, maximum and range of numbers, plus float/int array conversion."""

from __future__ import annotations

from collections.abc import Iterable


def min_float(a: float, b: float) -> float:
    """Return the smaller of two floats (b when they compare unordered)."""
    return a if a < b else b


def max_float(a: float, b: float) -> float:
    """Return the larger of two floats (b when they compare unordered)."""
    return a if a > b else b


def min_int(a: int, b: int) -> int:
    """Return the smaller of two integers."""
    return a if a < b else b


def max_int(a: int, b: int) -> int:
    """Return the larger of two integers."""
    return a if a > b else b


def _non_empty(values: Iterable) -> list:
    items = list(values)
    if not items:
        raise ValueError("sequence must not be empty")
    return items


def min_floats(values: Iterable[float]) -> float:
    """Return the smallest value; raise ValueError if there are none."""
    return min(_non_empty(values))


def max_floats(values: Iterable[float]) -> float:
    """Return the largest value; raise ValueError if there are none."""
    return max(_non_empty(values))


def range_floats(values: Iterable[float]) -> float:
    """Return max - min of the values; raise ValueError if there are none."""
    items = _non_empty(values)
    return max(items) - min(items)


def min_ints(values: Iterable[int]) -> int:
    """Return the smallest integer; raise ValueError if there are none."""
    return min(_non_empty(values))


def max_ints(values: Iterable[int]) -> int:
    """Return the largest integer; raise ValueError if there are none."""
    return max(_non_empty(values))


def range_ints(values: Iterable[int]) -> int:
    """Return max - min of the integers; raise ValueError if there are none."""
    items = _non_empty(values)
    return max(items) - min(items)


def floats_to_ints(values: Iterable[float]) -> list[int]:
    """Convert floats to integers, truncating towards zero."""
    return [int(value) for value in values]


def ints_to_floats(values: Iterable[int]) -> list[float]:
    """Convert integers to floats."""
    return [float(value) for value in values]
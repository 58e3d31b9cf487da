"""Measures of central tendency: mean, median and mode."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import groupby


def _non_empty(data: Iterable) -> list:
    items = list(data)
    if not items:
        raise ValueError("sequence must not be empty")
    return items


def _reject_nan(items: list[float]) -> None:
    if any(math.isnan(value) for value in items):
        raise ValueError("data contains NaN")


def _modes_of_sorted(ordered: list) -> list:
    """Return every value that occurs most often in an ascending sequence."""
    runs = [(value, sum(1 for _ in group)) for value, group in groupby(ordered)]
    top = max(count for _, count in runs)
    return [value for value, count in runs if count == top]


def _median_of_sorted(ordered: list) -> float:
    size = len(ordered)
    middle = size // 2
    if size % 2 == 1:
        return float(ordered[middle])
    return (float(ordered[middle - 1]) + ordered[middle]) / 2.0


def mean_floats(data: Iterable[float]) -> float:
    """Return the arithmetic mean.

    Raises ValueError for empty input or if any value is NaN.
    """
    items = _non_empty(data)
    _reject_nan(items)
    return sum(items) / len(items)


def median_floats(data: Iterable[float]) -> float:
    """Return the median; the mean of the two middle values for even sizes.

    Raises ValueError for empty input. The input is not modified.
    """
    return _median_of_sorted(sorted(_non_empty(data)))


def mode_floats(data: Iterable[float]) -> list[float]:
    """Return all most frequent values in ascending order.

    When every value is distinct, every value is a mode. Raises ValueError
    for empty input or if any value is NaN.
    """
    items = _non_empty(data)
    _reject_nan(items)
    return _modes_of_sorted(sorted(items))


def mean_ints(data: Iterable[int]) -> float:
    """Return the arithmetic mean of integers as a float.

    Raises ValueError for empty input.
    """
    items = _non_empty(data)
    return sum(items) / len(items)


def median_ints(data: Iterable[int]) -> float:
    """Return the median of integers as a float.

    Raises ValueError for empty input.
    """
    return _median_of_sorted(sorted(_non_empty(data)))


def mode_ints(data: Iterable[int]) -> list[int]:
    """Return all most frequent integers in ascending order.

    Raises ValueError for empty input.
    """
    return _modes_of_sorted(sorted(_non_empty(data)))
"""Measures of spread: range, variance, deviations, IQR and the Qn estimator."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import combinations

from .central import mean_floats, mean_ints
from .percentiles import percentile_floats, percentiles_floats

# Scale factor that makes the absolute deviation consistent with a normal distribution.
MAD_NORMAL_SCALE = 1.4826
# Scale factor for the Qn estimator.
QN_SCALE = 2.21914


def _at_least(data: Iterable, minimum: int) -> list:
    items = list(data)
    if len(items) < minimum:
        raise ValueError(f"at least {minimum} value(s) required, got {len(items)}")
    return items


def _reject_nan(items: list[float]) -> None:
    if any(math.isnan(value) for value in items):
        raise ValueError("data contains NaN")


def value_range(data: Iterable[float]) -> float:
    """Return max - min of the data.

    Raises ValueError for empty input or if any value is NaN.
    """
    items = _at_least(data, 1)
    _reject_nan(items)
    return max(items) - min(items)


def interquartile_range(data: Iterable[float]) -> float:
    """Return Q3 - Q1 using linearly interpolated percentiles.

    Raises ValueError for empty input. The input is not modified.
    """
    items = _at_least(data, 1)
    q1, q3 = percentiles_floats(items, (25.0, 75.0))
    return q3 - q1


def mean_absolute_deviation(data: Iterable[float], scale: float = 1.0) -> float:
    """Return mean(|x - mean(x)|) multiplied by scale.

    Raises ValueError for empty input or if any value is NaN.
    """
    items = _at_least(data, 1)
    mean = mean_floats(items)
    return sum(abs(value - mean) for value in items) / len(items) * scale


def median_absolute_deviation(data: Iterable[float]) -> float:
    """Return the absolute deviation scaled by 1.4826 for normal consistency.

    Raises ValueError for empty input or if any value is NaN.
    """
    return mean_absolute_deviation(data, MAD_NORMAL_SCALE)


def variance(data: Iterable[float]) -> float:
    """Return the unbiased sample variance (divides by n - 1).

    Raises ValueError for fewer than two values or if any value is NaN.
    """
    items = _at_least(data, 2)
    mean = mean_floats(items)
    return sum((value - mean) ** 2 for value in items) / (len(items) - 1)


def std_dev(data: Iterable[float]) -> float:
    """Return the sample standard deviation.

    Raises ValueError for fewer than two values or if any value is NaN.
    """
    return math.sqrt(variance(data))


def qn_estimator(data: Iterable[float]) -> float:
    """Return the first quartile of all pairwise absolute differences, scaled by 2.21914.

    Takes O(n^2) time. Raises ValueError for fewer than two values or if
    any value is NaN.
    """
    items = _at_least(data, 2)
    _reject_nan(items)
    diffs = [abs(a - b) for a, b in combinations(items, 2)]
    return percentile_floats(diffs, 25.0) * QN_SCALE


def _as_floats(data: Iterable[int]) -> list[float]:
    return [float(value) for value in data]


def value_range_ints(data: Iterable[int]) -> float:
    """Return max - min of integer data as a float; raise ValueError if empty."""
    items = _at_least(data, 1)
    return float(max(items) - min(items))


def variance_ints(data: Iterable[int]) -> float:
    """Return the unbiased sample variance of integer data.

    Raises ValueError for fewer than two values.
    """
    items = _at_least(data, 2)
    mean = mean_ints(items)
    return sum((float(value) - mean) ** 2 for value in items) / (len(items) - 1)


def std_dev_ints(data: Iterable[int]) -> float:
    """Return the sample standard deviation of integer data.

    Raises ValueError for fewer than two values.
    """
    return math.sqrt(variance_ints(data))


def mean_absolute_deviation_ints(data: Iterable[int]) -> float:
    """Return mean(|x - mean(x)|) of integer data; raise ValueError if empty."""
    items = _at_least(data, 1)
    mean = mean_ints(items)
    return sum(abs(float(value) - mean) for value in items) / len(items)


def interquartile_range_ints(data: Iterable[int]) -> float:
    """Return Q3 - Q1 of integer data; raise ValueError if empty."""
    return interquartile_range(_as_floats(data))


def median_absolute_deviation_ints(data: Iterable[int]) -> float:
    """Return the normal-scaled absolute deviation of integer data; raise ValueError if empty."""
    return median_absolute_deviation(_as_floats(data))


def qn_estimator_ints(data: Iterable[int]) -> float:
    """Return the Qn scale estimator of integer data.

    Raises ValueError for fewer than two values.
    """
    return qn_estimator(_as_floats(data))
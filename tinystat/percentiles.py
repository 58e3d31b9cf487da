"""Percentiles, quartiles and five-number summaries.

Percentiles use linear interpolation between the closest ranks, with the
rank of percentile p in n sorted values at p / 100 * (n - 1).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .model import FiveNumSummary, Quartile


def _non_empty(data: Iterable) -> list:
    items = list(data)
    if not items:
        raise ValueError("sequence must not be empty")
    return items


def _check_percentile(percentile: float) -> None:
    if not 0.0 <= percentile <= 100.0:
        raise ValueError(f"percentile must lie in [0, 100], got {percentile}")


def _from_sorted(ordered: Sequence, percentile: float) -> float:
    size = len(ordered)
    if size == 1:
        return float(ordered[0])
    rank = (percentile / 100.0) * (size - 1)
    lower = int(rank)
    if lower + 1 >= size:
        return float(ordered[lower])
    frac = rank - lower
    return float(ordered[lower]) + frac * (ordered[lower + 1] - ordered[lower])


def _many(data: Iterable, percentiles: Iterable[float]) -> list[float]:
    ordered = sorted(_non_empty(data))
    wanted = sorted(percentiles)
    if not wanted:
        raise ValueError("at least one percentile is required")
    for percentile in wanted:
        _check_percentile(percentile)
    return [_from_sorted(ordered, percentile) for percentile in wanted]


def _quartile_percent(quartile: int) -> float:
    try:
        return Quartile(quartile).percent
    except ValueError:
        raise ValueError(f"invalid quartile: {quartile}") from None


def _summary(data: Iterable) -> FiveNumSummary:
    ordered = sorted(_non_empty(data))
    q1 = _from_sorted(ordered, 25.0)
    q3 = _from_sorted(ordered, 75.0)
    size = len(ordered)
    if size % 2 == 1:
        median = float(ordered[size // 2])
    else:
        median = _from_sorted(ordered, 50.0)
    iqr = q3 - q1
    return FiveNumSummary(
        min=float(ordered[0]),
        q1=q1,
        median=median,
        q3=q3,
        max=float(ordered[-1]),
        iqr=iqr,
        lower_fence=q1 - 1.5 * iqr,
        upper_fence=q3 + 1.5 * iqr,
    )


def percentile_floats(data: Iterable[float], percentile: float) -> float:
    """Return one percentile of the data.

    Raises ValueError for empty input or a percentile outside [0, 100].
    """
    items = _non_empty(data)
    _check_percentile(percentile)
    return _from_sorted(sorted(items), percentile)


def percentiles_floats(data: Iterable[float], percentiles: Iterable[float]) -> list[float]:
    """Return several percentiles, in ascending order of percentile.

    The data is sorted once. Raises ValueError for empty data, no
    percentiles, or any percentile outside [0, 100].
    """
    return _many(data, percentiles)


def quartile_floats(data: Iterable[float], quartile: int) -> float:
    """Return Q1, the median or Q3 of the data.

    Raises ValueError for empty input or an unknown quartile.
    """
    items = _non_empty(data)
    return percentile_floats(items, _quartile_percent(quartile))


def five_num_summary_floats(data: Iterable[float]) -> FiveNumSummary:
    """Return the five-number summary with IQR and Tukey's fences.

    Raises ValueError for empty input.
    """
    return _summary(data)


def percentile_ints(data: Iterable[int], percentile: float) -> float:
    """Return one percentile of integer data as a float.

    Raises ValueError for empty input or a percentile outside [0, 100].
    """
    items = _non_empty(data)
    _check_percentile(percentile)
    return _from_sorted(sorted(items), percentile)


def percentiles_ints(data: Iterable[int], percentiles: Iterable[float]) -> list[float]:
    """Return several percentiles of integer data, in ascending order of percentile.

    Raises ValueError for empty data, no percentiles, or any percentile
    outside [0, 100].
    """
    return _many(data, percentiles)


def quartile_ints(data: Iterable[int], quartile: int) -> float:
    """Return Q1, the median or Q3 of integer data.

    Raises ValueError for empty input or an unknown quartile.
    """
    items = _non_empty(data)
    return percentile_ints(items, _quartile_percent(quartile))


def five_num_summary_ints(data: Iterable[int]) -> FiveNumSummary:
    """Return the five-number summary of integer data.

    Raises ValueError for empty input.
    """
    return _summary(data)
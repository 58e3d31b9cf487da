"""Outlier detection with Tukey's 1.5 * IQR rule."""

from __future__ import annotations

from collections.abc import Iterable

from .model import FiveNumSummary


def is_outlier(value: float, summary: FiveNumSummary) -> bool:
    """Return True if value lies outside [Q1 - 1.5*IQR, Q3 + 1.5*IQR]."""
    iqr = summary.q3 - summary.q1
    lower = summary.q1 - 1.5 * iqr
    upper = summary.q3 + 1.5 * iqr
    return value < lower or value > upper


def count_outliers(data: Iterable[float], summary: FiveNumSummary) -> int:
    """Return how many values are outliers with respect to summary."""
    return sum(1 for value in data if is_outlier(value, summary))


def flag_outliers(values: Iterable[float], summary: FiveNumSummary) -> list[bool]:
    """Return one flag per value, True where the value is an outlier."""
    return [is_outlier(value, summary) for value in values]


def collect_outliers(values: Iterable[float], summary: FiveNumSummary) -> list[float]:
    """Return the outlying values in their original order."""
    return [value for value in values if is_outlier(value, summary)]
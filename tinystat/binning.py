"""Bin edges and bin counts for numeric data."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from .basic import max_floats, min_floats
from .percentiles import percentiles_floats
from .rounding import round_decimal

# Edges are rounded to this many decimal places for stable output.
EDGE_DECIMALS = 6


class BinningStrategy(Enum):
    """How bin edges are spaced."""

    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    PERCENTILE = "percentile"


@dataclass
class BinningConfig:
    """A range split into count bins; edges holds count + 1 boundaries once computed."""

    min: float
    max: float
    count: int
    edges: list[float] = field(default_factory=list)


def _check_layout(config: BinningConfig) -> None:
    if config.count <= 0:
        raise ValueError("at least one bin is required")
    if not config.max > config.min:
        raise ValueError(f"invalid range: max {config.max} must exceed min {config.min}")


def calculate_edges(config: BinningConfig, strategy: BinningStrategy) -> BinningConfig:
    """Return a copy of config with its edges computed for the strategy.

    Linear and logarithmic spacing are supported; edges are rounded to six
    decimals. Raises ValueError for no bins, an empty range, or a strategy
    that needs data (percentile).
    """
    _check_layout(config)
    steps = range(config.count + 1)
    if strategy is BinningStrategy.LINEAR:
        step = (config.max - config.min) / config.count
        edges = [round_decimal(config.min + i * step, EDGE_DECIMALS) for i in steps]
    elif strategy is BinningStrategy.LOGARITHMIC:
        log_min = math.log10(config.min + 1)
        log_max = math.log10(config.max + 1)
        log_step = (log_max - log_min) / config.count
        edges = [
            round_decimal(10.0 ** (log_min + i * log_step) - 1, EDGE_DECIMALS) for i in steps
        ]
    else:
        raise ValueError(f"strategy {strategy!r} cannot compute edges without data")
    return replace(config, edges=edges)


def bin_values_int(values: Iterable[int], config: BinningConfig) -> list[int]:
    """Count the values falling into each of the config's equal-width bins.

    Values at or above max land in the last bin, values below min in the first.
    """
    if config.count <= 0:
        raise ValueError("at least one bin is required")
    span = config.max - config.min
    if span == 0:
        raise ValueError("bin range must not be empty")
    bins = [0] * config.count
    for value in values:
        normalized = (value - config.min) / span
        index = min(max(int(normalized * config.count), 0), config.count - 1)
        bins[index] += 1
    return bins


def auto_bin(
    values: Iterable[float], count: int, strategy: BinningStrategy = BinningStrategy.LINEAR
) -> BinningConfig:
    """Build a binning over the range of the data.

    The percentile strategy places inner edges at equally spaced
    percentiles so that each bin holds about the same number of values.
    Raises ValueError for empty data or fewer than one bin.
    """
    items = list(values)
    if not items:
        raise ValueError("sequence must not be empty")
    if count <= 0:
        raise ValueError("at least one bin is required")
    config = BinningConfig(min=min_floats(items), max=max_floats(items), count=count)
    if strategy is not BinningStrategy.PERCENTILE:
        return calculate_edges(config, strategy)
    cuts = [100.0 * (i + 1) / count for i in range(count - 1)]
    inner = percentiles_floats(items, cuts) if cuts else []
    config.edges = [config.min, *inner, config.max]
    return config


def _check_index(config: BinningConfig, index: int) -> None:
    if not 0 <= index < config.count:
        raise IndexError(f"bin index {index} out of range for {config.count} bins")


def bin_center(config: BinningConfig, index: int) -> float:
    """Return the midpoint of bin index."""
    _check_index(config, index)
    edges: Sequence[float] = config.edges
    return (edges[index] + edges[index + 1]) / 2


def bin_width(config: BinningConfig, index: int) -> float:
    """Return the width of bin index."""
    _check_index(config, index)
    return config.edges[index + 1] - config.edges[index]
import statistics

import pytest

from tinystat.model import Quartile
from tinystat.percentiles import (
    five_num_summary_floats,
    five_num_summary_ints,
    percentile_floats,
    percentile_ints,
    percentiles_floats,
    percentiles_ints,
    quartile_floats,
    quartile_ints,
)

DATA = [12.0, 3.5, 7.0, -4.0, 9.25, 0.0, 15.5, 6.0]
INTS = [12, 3, 7, -4, 9, 0, 15, 6, 21]


def test_percentile_extremes_are_min_and_max():
    assert percentile_floats(DATA, 0.0) == min(DATA)
    assert percentile_floats(DATA, 100.0) == max(DATA)


def test_percentile_matches_inclusive_quantiles():
    quartiles = statistics.quantiles(DATA, n=4, method="inclusive")
    assert percentile_floats(DATA, 25.0) == pytest.approx(quartiles[0])
    assert percentile_floats(DATA, 50.0) == pytest.approx(quartiles[1])
    assert percentile_floats(DATA, 75.0) == pytest.approx(quartiles[2])


def test_percentile_single_value():
    assert percentile_floats([42.0], 37.0) == 42.0


def test_percentile_is_monotonic():
    values = [percentile_floats(DATA, p) for p in range(0, 101, 5)]
    assert values == sorted(values)


@pytest.mark.parametrize("bad", [-0.1, 100.5])
def test_percentile_out_of_range(bad):
    with pytest.raises(ValueError):
        percentile_floats(DATA, bad)
    with pytest.raises(ValueError):
        percentile_ints(INTS, bad)


def test_percentile_empty():
    with pytest.raises(ValueError):
        percentile_floats([], 50.0)
    with pytest.raises(ValueError):
        percentile_ints([], 50.0)


def test_percentiles_are_returned_in_sorted_percentile_order():
    results = percentiles_floats(DATA, [75.0, 0.0, 50.0])
    assert results == [
        percentile_floats(DATA, 0.0),
        percentile_floats(DATA, 50.0),
        percentile_floats(DATA, 75.0),
    ]


def test_percentiles_errors():
    with pytest.raises(ValueError):
        percentiles_floats(DATA, [])
    with pytest.raises(ValueError):
        percentiles_floats(DATA, [10.0, 120.0])
    with pytest.raises(ValueError):
        percentiles_ints(INTS, [-5.0])


def test_percentiles_ints_match_single_calls():
    wanted = [90.0, 10.0]
    assert percentiles_ints(INTS, wanted) == [
        percentile_ints(INTS, 10.0),
        percentile_ints(INTS, 90.0),
    ]


def test_quartiles_match_percentiles():
    for quartile in Quartile:
        assert quartile_floats(DATA, quartile) == percentile_floats(DATA, quartile.percent)
        assert quartile_ints(INTS, quartile) == percentile_ints(INTS, quartile.percent)


def test_quartile_invalid():
    with pytest.raises(ValueError):
        quartile_floats(DATA, 3)
    with pytest.raises(ValueError):
        quartile_ints(INTS, 3)


def test_median_quartile_of_odd_ints_is_middle_element():
    assert quartile_ints([5, 1, 9], Quartile.MEDIAN) == 5.0


def test_five_num_summary_floats_invariants():
    summary = five_num_summary_floats(DATA)
    assert summary.min == min(DATA)
    assert summary.max == max(DATA)
    assert summary.q1 == percentile_floats(DATA, 25.0)
    assert summary.q3 == percentile_floats(DATA, 75.0)
    assert summary.median == pytest.approx(statistics.median(DATA))
    assert summary.iqr == pytest.approx(summary.q3 - summary.q1)
    assert summary.lower_fence == pytest.approx(summary.q1 - 1.5 * summary.iqr)
    assert summary.upper_fence == pytest.approx(summary.q3 + 1.5 * summary.iqr)


def test_five_num_summary_ints_invariants():
    summary = five_num_summary_ints(INTS)
    assert summary.min == min(INTS)
    assert summary.max == max(INTS)
    assert summary.median == statistics.median(INTS)
    assert summary.min <= summary.q1 <= summary.median <= summary.q3 <= summary.max


def test_five_num_summary_empty():
    with pytest.raises(ValueError):
        five_num_summary_floats([])
    with pytest.raises(ValueError):
        five_num_summary_ints([])


def test_inputs_are_not_modified():
    data = list(DATA)
    five_num_summary_floats(data)
    percentiles_floats(data, [50.0])
    assert data == DATA
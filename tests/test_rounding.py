import math

import pytest

from tinystat.model import INT32_MAX, INT32_MIN
from tinystat.rounding import (
    ceil_floats_to_ints,
    ceil_to_int,
    floor_floats_to_ints,
    floor_to_int,
    round_decimal,
    round_floats_decimal,
    round_floats_to_ints,
    round_floats_to_multiple,
    round_to_int,
    round_to_multiple,
    safe_floats_to_ints,
    safe_round_to_int,
    trunc_floats_to_ints,
    trunc_to_int,
)

SAMPLES = [-7.75, -2.5, -0.4, 0.0, 0.6, 1.5, 3.25, 123.999]


def test_round_ties_away_from_zero():
    assert round_to_int(2.5) == 3
    assert round_to_int(-2.5) == -3


@pytest.mark.parametrize("x", SAMPLES)
def test_round_to_int_is_nearest(x):
    assert abs(round_to_int(x) - x) <= 0.5


@pytest.mark.parametrize("x", SAMPLES)
def test_floor_and_ceil_bracket(x):
    lo = floor_to_int(x)
    hi = ceil_to_int(x)
    assert lo <= x <= hi
    assert hi - lo <= 1
    assert ceil_to_int(x) == -floor_to_int(-x)


@pytest.mark.parametrize("x", SAMPLES)
def test_trunc_goes_towards_zero(x):
    expected = floor_to_int(x) if x >= 0 else ceil_to_int(x)
    assert trunc_to_int(x) == expected


@pytest.mark.parametrize("value,multiple", [(7.3, 0.5), (-11.0, 4.0), (2.2, 1.0)])
def test_round_to_multiple_lands_on_multiple(value, multiple):
    result = round_to_multiple(value, multiple)
    assert (result / multiple) == pytest.approx(round(result / multiple))
    assert abs(result - value) <= multiple / 2 + 1e-12


def test_round_to_multiple_zero_rejected():
    with pytest.raises(ValueError):
        round_to_multiple(1.0, 0.0)


@pytest.mark.parametrize("x", [1.23456, -9.87654, 0.005])
def test_round_decimal_close_and_idempotent(x):
    result = round_decimal(x, 2)
    assert abs(result - x) <= 0.005 + 1e-12
    assert round_decimal(result, 2) == result


def test_safe_round_in_range():
    assert safe_round_to_int(float(INT32_MAX)) == INT32_MAX
    assert safe_round_to_int(float(INT32_MIN)) == INT32_MIN


@pytest.mark.parametrize("x", [3e10, -3e10])
def test_safe_round_out_of_range(x):
    with pytest.raises(OverflowError):
        safe_round_to_int(x)


def test_array_functions_stop_at_nan():
    data = SAMPLES + [math.nan, 99.0]
    assert round_floats_to_ints(data) == [round_to_int(v) for v in SAMPLES]
    assert floor_floats_to_ints(data) == [floor_to_int(v) for v in SAMPLES]
    assert ceil_floats_to_ints(data) == [ceil_to_int(v) for v in SAMPLES]
    assert trunc_floats_to_ints(data) == [trunc_to_int(v) for v in SAMPLES]


def test_array_decimal_and_multiple_match_scalar():
    data = SAMPLES + [math.nan]
    assert round_floats_decimal(data, 1) == [round_decimal(v, 1) for v in SAMPLES]
    assert round_floats_to_multiple(data, 0.25) == [
        round_to_multiple(v, 0.25) for v in SAMPLES
    ]


def test_array_multiple_zero_rejected():
    with pytest.raises(ValueError):
        round_floats_to_multiple([1.0, 2.0], 0.0)


def test_leading_nan_gives_empty_result():
    assert round_floats_to_ints([math.nan, 1.0]) == []


def test_safe_floats_to_ints_zeroes_overflow():
    result, converted = safe_floats_to_ints([1.0, 3e10, -3e10, 2.0, math.nan, 5.0])
    assert len(result) == 4
    assert result[0] == round_to_int(1.0)
    assert result[1] == 0
    assert result[2] == 0
    assert result[3] == round_to_int(2.0)
    assert converted == 2
import math

import pytest

from tinystat.absolute import abs_float, abs_floats, abs_int32, abs_ints
from tinystat.model import INT32_MIN


def test_scalar_float():
    assert abs_float(3.5) == 3.5
    assert abs_float(-2.25) == 2.25
    assert abs_float(0.0) == 0.0


def test_scalar_int():
    assert abs_int32(10) == 10
    assert abs_int32(-5) == 5
    assert abs_int32(0) == 0


def test_float_array():
    result = abs_floats([1.5, -2.5, 0.0, -0.0, 3.75])
    assert result[0] == pytest.approx(1.5, abs=1e-4)
    assert result[1] == pytest.approx(2.5, abs=1e-4)
    assert result[2] == 0.0
    assert result[3] == 0.0
    assert result[4] == pytest.approx(3.75, abs=1e-4)


def test_int_array():
    assert abs_ints([1, -2, 0, 100, -200]) == [1, 2, 0, 100, 200]


def test_mixed_signs_float():
    result = abs_floats([-1.1, 2.2, -3.3])
    assert result == pytest.approx([1.1, 2.2, 3.3], abs=1e-4)


def test_mixed_signs_int():
    assert abs_ints([-1, 2, -3]) == [1, 2, 3]


def test_single_elements():
    assert abs_floats([-5.5]) == pytest.approx([5.5], abs=1e-4)
    assert abs_ints([-5]) == [5]


def test_empty_float_array_rejected():
    with pytest.raises(ValueError):
        abs_floats([])


def test_empty_int_array_rejected():
    with pytest.raises(ValueError):
        abs_ints([])


def test_nan_in_float_array_rejected():
    with pytest.raises(ValueError):
        abs_floats([1.0, math.nan, 2.0])


def test_int32_min_in_array_rejected():
    with pytest.raises(OverflowError):
        abs_ints([1, INT32_MIN, 2])


def test_scalar_nan_rejected():
    with pytest.raises(ValueError):
        abs_float(math.nan)


def test_scalar_int32_min_rejected():
    with pytest.raises(OverflowError):
        abs_int32(INT32_MIN)


def test_result_never_negative():
    values = [-7.25, 0.5, -0.125, 9.0]
    assert all(v >= 0 for v in abs_floats(values))
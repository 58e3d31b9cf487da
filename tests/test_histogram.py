import pytest

from tinystat.tdd.histogram import histogram


def _rows(text):
    return text.split("\n")[2:-1]


def test_header():
    assert histogram([1, 2, 3], 10).startswith("\nHistogram\n")


def test_one_line_per_value():
    values = [5, 0, 7, 3]
    assert len(_rows(histogram(values, 20))) == len(values)


def test_largest_bar_has_full_width():
    values = [4, 9, 2]
    rows = _rows(histogram(values, 12))
    assert rows[1].count("▀") == 12
    assert all(row.count("▀") <= 12 for row in rows)


def test_bars_follow_count_order():
    values = [3, 8, 1, 6]
    rows = _rows(histogram(values, 40))
    lengths = [row.count("▀") for row in rows]
    ordered = sorted(range(len(values)), key=lambda i: values[i])
    assert [lengths[i] for i in ordered] == sorted(lengths)


def test_rows_end_with_count_and_start_with_index():
    values = [11, 22]
    rows = _rows(histogram(values, 5))
    for index, (row, count) in enumerate(zip(rows, values)):
        assert row.endswith(f" {count}")
        assert row.startswith(f"{index:3d} ")


def test_pinned_rendering():
    assert histogram([1, 2], 4) == "\nHistogram\n  0 ▀▀ 1\n  1 ▀▀▀▀ 2\n"


def test_all_zero_counts_draw_empty_bars():
    rows = _rows(histogram([0, 0], 10))
    assert all("▀" not in row for row in rows)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        histogram([], 10)


def test_zero_width_rejected():
    with pytest.raises(ValueError):
        histogram([1, 2], 0)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        histogram([1, -2], 5)
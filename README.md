# tinystat

A small, dependency-free statistics toolkit that works on plain Python
sequences of numbers. Functions take any iterable of floats or integers,
return new values and never change their input. Invalid input raises an
exception (`ValueError`, `OverflowError`, `ZeroDivisionError` or
`IndexError`). It does not return a sentinel value.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tinystat.central`: `mean_floats`, `median_floats`, `mode_floats` and
  the integer versions `mean_ints`, `median_ints`, `mode_ints`. The mode
  functions return every most frequent value in ascending order.
- `tinystat.percentiles`: percentiles with linear interpolation
  (`percentile_floats`, `percentiles_floats`), quartiles
  (`quartile_floats`) and `five_num_summary_floats`, which returns a
  `FiveNumSummary` with IQR and Tukey fences. Each has an `_ints`
  counterpart.
- `tinystat.dispersion`: `value_range`, `variance` and `std_dev` (sample,
  divided by n - 1), `interquartile_range`, `mean_absolute_deviation`,
  `median_absolute_deviation` (mean absolute deviation scaled by 1.4826)
  and `qn_estimator`. Each has an `_ints` counterpart.
- `tinystat.outliers`: `is_outlier`, `count_outliers`, `flag_outliers` and
  `collect_outliers`, using the 1.5 × IQR rule against a `FiveNumSummary`.
- `tinystat.binning`: `BinningConfig`, `BinningStrategy` (`LINEAR`,
  `LOGARITHMIC`, `PERCENTILE`), `calculate_edges`, `auto_bin`,
  `bin_values_int`, `bin_center` and `bin_width`.
- `tinystat.graphs`: `smooth_histogram` draws bin counts as a string of
  block-character bars. `Cp437` names code page 437 characters, and its
  `char()` method gives the Unicode glyph for each one.
- `tinystat.model`: `Quartile`, `FiveNumSummary`, numeric constants such as
  `INT32_MIN`, `EPSILON`, `REL_TOL` and `ABS_TOL`, and the tolerance checks
  `float_eq` and `approx_eq`.
- Helpers:
  - `tinystat.compare`: `compare_floats`, `almost_equal`, `is_near_zero`,
    `compare_ints`.
  - `tinystat.util`: `sort_floats`, `sort_ints`, `is_finite`, `is_normal`,
    `is_valid`, `all_valid`, `all_finite`, `is_sorted`, `replace_nan`.
  - `tinystat.sign`: `sign_float`, `sign_int`, `copysign`.
  - `tinystat.absolute`: `abs_float`, `abs_int32`, `abs_floats`, `abs_ints`.
  - `tinystat.basic`: scalar and sequence min, max and range, and
    float/int conversion.
  - `tinystat.clamp`: `clamp_float`, `clamp_int`, `clamp_floats`,
    `clamp_ints`.
  - `tinystat.rounding`: conversion to integers, rounding to decimals and
    to multiples. Ties round away from zero, and the element-wise
    functions stop at the first NaN.
  - `tinystat.division`: `safe_div_float`, `safe_div_int`, `divmod_int`.
    Integer division truncates towards zero.

## Example

```python
from tinystat.central import mean_floats, median_floats
from tinystat.percentiles import five_num_summary_floats
from tinystat.outliers import collect_outliers

data = [1.0, 2.0, 2.5, 3.0, 3.5, 4.0, 40.0]

mean_floats(data)        # arithmetic mean
median_floats(data)      # 3.0

summary = five_num_summary_floats(data)
collect_outliers(data, summary)   # [40.0]
```

The next example bins the data and prints a text histogram:

```python
from tinystat.binning import BinningStrategy, auto_bin, bin_values_int
from tinystat.graphs import smooth_histogram

values = [1, 2, 2, 3, 5, 8, 9]
config = auto_bin(values, 4, BinningStrategy.LINEAR)
bins = bin_values_int(values, config)
print(smooth_histogram(bins, config, 10, True), end="")
```

## Test-run helpers

`tinystat.tdd` holds a few helpers for reporting test runs:

- `tinystat.tdd.report`:
  - `TestSummary` holds the results of a run.
  - `set_format` selects a `ReportFormat`: `CONSOLE`, `JSON`, `VERBOSE` or
    `SILENT`.
  - `generate_report` writes the summary to a stream.
  - `save_history` appends one line per run to a file, `history.tdd` by
    default.
- `tinystat.tdd.progress`: `Progress` redraws a block bar (`bar`) or a bare
  percentage (`percent`) on a stream.
- `tinystat.tdd.spinner`: `Spinner` cycles through frames with `step` and
  erases itself with `clear`.
- `tinystat.tdd.histogram`: `histogram` returns a simple bar chart of
  counts as a string.

## What it does not do

- It does not generate random samples or probability distributions.
- It has no command-line program.
- The `tinystat.tdd` helpers format and record results only. They do not
  find, register or run tests.
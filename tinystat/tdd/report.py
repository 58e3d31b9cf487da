"""Test-run summaries rendered as console, JSON, verbose or silent reports."""

from __future__ import annotations

import json
import math
import sys
import time
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import TextIO

DEFAULT_HISTORY_PATH = "history.tdd"


class ReportFormat(Enum):
    """How a test summary is rendered."""

    CONSOLE = "console"
    JSON = "json"
    VERBOSE = "verbose"
    SILENT = "silent"


@dataclass
class TestSummary:
    """Counts and timing of one test suite run."""

    __test__ = False

    total: int = 0
    passed: int = 0
    failed: int = 0
    suite_name: str = ""
    time_elapsed: float = 0.0


_current_format = ReportFormat.CONSOLE


def set_format(report_format: ReportFormat) -> None:
    """Set the format used by generate_report (console by default)."""
    global _current_format
    _current_format = ReportFormat(report_format)


def _console(summary: TestSummary) -> str:
    status = ":) ALL PASSED" if summary.failed == 0 else ":( FAILURES"
    return (
        f"\n__| {summary.suite_name} |________________________________\n"
        f"  Tests:  {summary.total}\n"
        f"  Passed: {summary.passed}\n"
        f"  Failed: {summary.failed}\n"
        f"  Time:   {summary.time_elapsed:.3f}s\n"
        f"  Status: {status}\n"
        "----------------------------------------------\n"
    )


def _json(summary: TestSummary, now: int) -> str:
    return (
        f'{{"suite":{json.dumps(summary.suite_name)},"passed":{summary.passed},'
        f'"failed":{summary.failed},"total":{summary.total},'
        f'"time":{summary.time_elapsed:.3f},"timestamp":{now}}}\n'
    )


def _verbose(summary: TestSummary, now: int) -> str:
    rate = summary.passed / summary.total * 100.0 if summary.total else math.nan
    return (
        f"\n[TEST REPORT] {time.ctime(now)}\n\n"
        "--------------------------------\n"
        "Configuration:\n"
        "  Format:    Verbose Debug\n"
        f"  Timestamp: {now}\n"
        "Results:\n"
        f"  Pass Rate: {rate:.1f}%\n"
        f"  Duration:  {summary.time_elapsed:.3f} seconds\n"
    )


def _silent(summary: TestSummary) -> str:
    if summary.failed > 0:
        return f"FAILURES: {summary.failed}/{summary.total}\n"
    return ""


def generate_report(summary: TestSummary, output: TextIO | None = None) -> None:
    """Write the summary to output (standard output by default) in the current format."""
    stream = sys.stdout if output is None else output
    now = int(time.time())
    if _current_format is ReportFormat.CONSOLE:
        text = _console(summary)
    elif _current_format is ReportFormat.JSON:
        text = _json(summary, now)
    elif _current_format is ReportFormat.VERBOSE:
        text = _verbose(summary, now)
    else:
        text = _silent(summary)
    stream.write(text)


def save_history(
    summary: TestSummary, path: str | PathLike[str] = DEFAULT_HISTORY_PATH
) -> bool:
    """Append one line describing the run to the history file.

    Returns False, without raising, if the file cannot be opened.
    """
    now = int(time.time())
    line = (
        f"{now}|{summary.suite_name}|{summary.passed}|{summary.failed}"
        f"|{summary.time_elapsed:.3f}\n"
    )
    with suppress(OSError):
        with open(path, "a", encoding="utf-8") as history:
            history.write(line)
        return True
    return False
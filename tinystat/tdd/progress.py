"""Text progress indicators: a block bar and a bare percentage."""

from __future__ import annotations

import sys
from typing import TextIO

from ..graphs import Cp437

_BAR_FILL = Cp437.LIGHT_SHADE.char()


class Progress:
    """Progress through total units of work, redrawn every stride units.

    The stride is total // steps when steps is given, otherwise total // width.
    """

    def __init__(self, total: int, current: int = 0, steps: int = 0, width: int = 0) -> None:
        divisor = steps or width
        if divisor <= 0:
            raise ValueError("either steps or width must be positive")
        stride = total // divisor
        if stride <= 0:
            raise ValueError(f"total {total} is too small for {divisor} steps")
        self.total = total
        self.current = current
        self.width = width
        self.stride = stride

    @property
    def percent_done(self) -> int:
        """Whole percentage of the work completed."""
        return self.current * 100 // self.total

    def _advance(self) -> bool:
        if self.current >= self.total:
            raise RuntimeError("progress is already complete")
        previous = self.current
        self.current += 1
        return previous % self.stride == 0 or self.current >= self.total

    def bar(self, out: TextIO | None = None) -> bool:
        """Advance one unit and redraw the bar when due; return whether it was drawn."""
        if not self._advance():
            return False
        stream = sys.stdout if out is None else out
        filled = self.current * self.width // self.total
        cells = _BAR_FILL * filled + " " * (self.width - filled)
        stream.write(f"\r[{cells}] {self.percent_done:3d}%")
        stream.flush()
        return True

    def percent(self, out: TextIO | None = None) -> bool:
        """Advance one unit and redraw the percentage when due; return whether it was drawn."""
        if not self._advance():
            return False
        stream = sys.stdout if out is None else out
        stream.write(f"\r {self.percent_done:3d}%")
        stream.flush()
        return True
"""A simple horizontal bar histogram of counts."""

from __future__ import annotations

from collections.abc import Sequence

from ..graphs import Cp437

_BAR = Cp437.UPPER_HALF_BLOCK.char()


def histogram(values: Sequence[int], width: int) -> str:
    """Render counts as bars scaled so the largest is width characters long.

    Each line shows the index, the bar and the count. Raises ValueError for
    no values, a width below one, or a negative count.
    """
    counts = list(values)
    if not counts:
        raise ValueError("at least one value is required")
    if width <= 0:
        raise ValueError("width must be positive")
    if any(count < 0 for count in counts):
        raise ValueError("counts must not be negative")
    peak = max(counts)
    lines = ["\nHistogram\n"]
    for index, count in enumerate(counts):
        length = count * width // peak if peak else 0
        lines.append(f"{index:3d} {_BAR * length} {count}\n")
    return "".join(lines)
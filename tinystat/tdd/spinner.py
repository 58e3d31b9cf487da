"""A one-character spinner that cycles through animation frames."""

from __future__ import annotations

import sys
from typing import TextIO

from ..graphs import Cp437

DEFAULT_FRAMES = "|/-\\"
SHADED_BOX_FRAMES = "".join(
    shade.char()
    for shade in (
        Cp437.LIGHT_SHADE,
        Cp437.MEDIUM_SHADE,
        Cp437.DARK_SHADE,
        Cp437.FULL_BLOCK,
        Cp437.DARK_SHADE,
        Cp437.MEDIUM_SHADE,
    )
)


class Spinner:
    """Draws the next frame at the start of the line on every step."""

    def __init__(self, frames: str | None = None) -> None:
        frames = DEFAULT_FRAMES if frames is None else frames
        if not frames:
            raise ValueError("a spinner needs at least one frame")
        self.frames = frames
        self.counter = 0

    def step(self, out: TextIO | None = None) -> None:
        """Draw the next frame."""
        stream = sys.stdout if out is None else out
        stream.write("\r" + self.frames[self.counter % len(self.frames)])
        self.counter += 1
        stream.flush()

    def clear(self, out: TextIO | None = None) -> None:
        """Erase the spinner from the line."""
        stream = sys.stdout if out is None else out
        stream.write("\r \r")
        stream.flush()
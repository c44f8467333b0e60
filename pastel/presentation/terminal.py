"""
Terminal sink: paints a block with a 24-bit ANSI background and prints the color code on it.
"""
import sys
from typing import TextIO

from ..generator.schema import hex_to_rgb
from .base import PresentationSink

_RESET = "\x1b[0m"


def ansi_background(color: str) -> str:
    """ANSI truecolor escape that sets the background to color ('#rrggbb')."""
    r, g, b = hex_to_rgb(color)
    return f"\x1b[48;2;{r};{g};{b}m"


class TerminalSink(PresentationSink):
    def __init__(self, stream: TextIO | None = None, width: int = 40, height: int = 3):
        self.stream = stream or sys.stdout
        self.width = max(1, width)
        self.height = max(0, height)
        self._background: str | None = None

    def set_background(self, color: str) -> None:
        self._background = ansi_background(color)
        for _ in range(self.height):
            self.stream.write(f"{self._background}{' ' * self.width}{_RESET}\n")

    def set_label(self, color: str) -> None:
        background = self._background or ansi_background(color)
        self.stream.write(f"{background}{color.center(self.width)}{_RESET}\n")
        self.stream.flush()


class PlainSink(PresentationSink):
    """Only the color code, one per line (pipes, logs)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def set_background(self, color: str) -> None:
        pass

    def set_label(self, color: str) -> None:
        self.stream.write(color + "\n")
        self.stream.flush()

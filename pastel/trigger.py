"""
Trigger sources: what asks for a new color. A session always updates once at start,
then once per event (a line on stdin, a fixed count, anything iterable).
"""
import logging
import sys
from typing import Any, Iterable, Iterator, TextIO

from .generator import ColorGenerator
from .presentation.base import PresentationSink
from .workflow_utils import log_structured, request_shutdown

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")


def count_events(n: int) -> Iterator[int]:
    """Fixed number of extra updates."""
    yield from range(max(0, n))


def stdin_events(stream: TextIO | None = None, prompt_out: TextIO | None = None) -> Iterator[str]:
    """One event per input line. Stops at EOF, a quit word, or a shutdown request."""
    stream = stream or sys.stdin
    while True:
        if prompt_out is not None:
            prompt_out.write("Enter for a new color, q to quit: ")
            prompt_out.flush()
        line = stream.readline()
        if not line or request_shutdown():
            return
        if line.strip().lower() in QUIT_WORDS:
            return
        yield line


def run_session(
    generator: ColorGenerator,
    sink: PresentationSink,
    events: Iterable[Any] = (),
) -> list[str]:
    """
    Initial update, then one update per event. Returns the colors in order.
    Stops before the next update once shutdown was requested.
    """
    colors = [generator.update_background(sink)]
    log_structured("info", event="color_updated", color=colors[0], trigger="startup")
    for event in events:
        if request_shutdown():
            logger.info("Shutdown requested; ending session after %s update(s)", len(colors))
            break
        color = generator.update_background(sink)
        colors.append(color)
        log_structured("info", event="color_updated", color=color, trigger="event")
    return colors

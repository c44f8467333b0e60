"""
Presentation sinks: where a generated color ends up (terminal, image swatch).
"""
from .base import PresentationSink
from .swatch import SwatchSink
from .terminal import PlainSink, TerminalSink

__all__ = ["PresentationSink", "PlainSink", "SwatchSink", "TerminalSink"]

"""
Abstract interface for showing a color. The generator calls set_background then set_label once per update.
Implementations can be: a terminal block, an image swatch, a test recorder.
"""
from abc import ABC, abstractmethod


class PresentationSink(ABC):
    """
    Receives '#rrggbb' strings from ColorGenerator.update_background.
    The generator does not know how the color is shown.
    """

    @abstractmethod
    def set_background(self, color: str) -> None:
        """Paint the background with color."""
        ...

    @abstractmethod
    def set_label(self, color: str) -> None:
        """Show the color code as text."""
        ...

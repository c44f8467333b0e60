"""
Image swatch sink: a solid RGB frame (numpy) with the color code drawn on it (Pillow).
Optionally written to PNG after every label update.
"""
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..generator.schema import hex_to_rgb
from .base import PresentationSink

logger = logging.getLogger(__name__)


def _load_font(font_size: int):
    try:
        return ImageFont.truetype("arial.ttf", font_size)
    except (OSError, IOError):
        try:
            return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", font_size)
        except (OSError, IOError):
            return ImageFont.load_default()


def render_label(
    frame: np.ndarray,
    text: str,
    *,
    font_size: int = 48,
    color: tuple[int, int, int] = (40, 40, 40),
    outline_color: tuple[int, int, int] | None = (255, 255, 255),
    outline_width: int = 1,
) -> np.ndarray:
    """
    Draw text centered on a frame. Uses Pillow for rendering.
    Returns a new frame; the input is left untouched.
    """
    if not text or not text.strip():
        return frame

    h, w = frame.shape[:2]
    pil = Image.fromarray(frame)
    draw = ImageDraw.Draw(pil)
    font = _load_font(font_size)

    bbox = draw.textbbox((0, 0), text, font=font)
    text_w = bbox[2] - bbox[0]
    text_h = bbox[3] - bbox[1]
    x = (w - text_w) // 2 - bbox[0]
    y = (h - text_h) // 2 - bbox[1]

    if outline_color and outline_width:
        for dx in range(-outline_width, outline_width + 1):
            for dy in range(-outline_width, outline_width + 1):
                if dx or dy:
                    draw.text((x + dx, y + dy), text, font=font, fill=outline_color)
    draw.text((x, y), text, font=font, fill=color)

    return np.array(pil)


class SwatchSink(PresentationSink):
    """
    Keeps the latest swatch in `frame` (H x W x 3, uint8).
    set_background fills it; set_label draws the code and saves to output_path if set.
    """

    def __init__(
        self,
        width: int = 512,
        height: int = 512,
        output_path: Path | None = None,
        font_size: int = 48,
    ):
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        self.output_path = Path(output_path) if output_path is not None else None
        self.font_size = font_size
        self._background = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self._frame = self._background

    @property
    def frame(self) -> np.ndarray:
        return self._frame

    def set_background(self, color: str) -> None:
        rgb = hex_to_rgb(color)
        self._background = np.full((self.height, self.width, 3), rgb, dtype=np.uint8)
        self._frame = self._background

    def set_label(self, color: str) -> None:
        self._frame = render_label(self._background, color, font_size=self.font_size)
        if self.output_path is not None:
            self.save(self.output_path)

    def save(self, path: Path) -> Path:
        """Write the current frame as PNG. Creates parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.fromarray(self._frame).save(path, format="PNG")
        logger.debug("Swatch written to %s", path)
        return path

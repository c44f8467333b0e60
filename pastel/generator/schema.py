"""
Color data: per-channel bounds, spread limits, and #rrggbb helpers.
Channels are plain ints (bytes 0–255 when bounds are sane); nothing here clamps.
"""
import re
from dataclasses import asdict, dataclass
from typing import Any

CHANNELS: tuple[str, ...] = ("r", "g", "b")

R_DEFAULT_MAX_VALUE = 230
G_DEFAULT_MAX_VALUE = 230
B_DEFAULT_MAX_VALUE = 230

R_DEFAULT_MIN_VALUE = 90
G_DEFAULT_MIN_VALUE = 90
B_DEFAULT_MIN_VALUE = 90

# Spread (max channel - min channel) above MIN_COLOR_DIFF is rejected.
# MAX_COLOR_DIFF is implied by it and never checked on its own.
MIN_COLOR_DIFF = 30
MAX_COLOR_DIFF = 130

# Rejected draws before the generator gives up and keeps the last one
DEFAULT_MAX_ATTEMPTS = 1000

_HEX_COLOR_RE = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


@dataclass(frozen=True)
class ChannelBounds:
    """One limit per channel. Read by channel letter: bounds["g"]."""

    r: int
    g: int
    b: int

    def __getitem__(self, channel: str) -> int:
        if channel not in CHANNELS:
            raise KeyError(channel)
        return getattr(self, channel)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


DEFAULT_MAX_LIMIT = ChannelBounds(R_DEFAULT_MAX_VALUE, G_DEFAULT_MAX_VALUE, B_DEFAULT_MAX_VALUE)
DEFAULT_MIN_LIMIT = ChannelBounds(R_DEFAULT_MIN_VALUE, G_DEFAULT_MIN_VALUE, B_DEFAULT_MIN_VALUE)


def channel_spread(rgb: tuple[int, int, int]) -> int:
    """Difference between the brightest and dimmest channel."""
    return max(rgb) - min(rgb)


def to_hex(rgb: tuple[int, int, int]) -> str:
    """(90, 90, 90) -> '#5a5a5a'. Each channel padded to two lowercase hex digits."""
    return "#" + "".join(f"{value:02x}" for value in rgb)


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """'#5a5a5a' -> (90, 90, 90). Raises ValueError for anything but #rrggbb."""
    match = _HEX_COLOR_RE.match((color or "").strip())
    if not match:
        raise ValueError(f"Not a #rrggbb color: {color!r}")
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b

"""
Pastel color generator: draws each channel inside its bounds, then rejects
triples whose spread is too wide (too vivid) and draws again.
"""
import logging
import math
from typing import TYPE_CHECKING, Any, Callable

from ..random_utils import secure_random
from .schema import (
    CHANNELS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_LIMIT,
    DEFAULT_MIN_LIMIT,
    MIN_COLOR_DIFF,
    ChannelBounds,
    channel_spread,
    to_hex,
)

if TYPE_CHECKING:
    from ..presentation.base import PresentationSink

logger = logging.getLogger(__name__)


def _or_default(value: float | None, default: int) -> int:
    # None means "not supplied"; 0 is a real bound
    return default if value is None else int(value)


class ColorGenerator:
    """
    Generates random colors limited to per-channel min/max bounds.

    Bounds are fixed at construction. Each call is independent of the previous
    ones; the only state is the bounds and the random source.
    Bounds are truncated to int (200.0 -> 200).
    """

    def __init__(
        self,
        r_max: int | None = None,
        g_max: int | None = None,
        b_max: int | None = None,
        r_min: int | None = None,
        g_min: int | None = None,
        b_min: int | None = None,
        *,
        random_source: Callable[[], float] | None = None,
        max_attempts: int | None = DEFAULT_MAX_ATTEMPTS,
    ):
        self._max_limit = ChannelBounds(
            r=_or_default(r_max, DEFAULT_MAX_LIMIT.r),
            g=_or_default(g_max, DEFAULT_MAX_LIMIT.g),
            b=_or_default(b_max, DEFAULT_MAX_LIMIT.b),
        )
        self._min_limit = ChannelBounds(
            r=_or_default(r_min, DEFAULT_MIN_LIMIT.r),
            g=_or_default(g_min, DEFAULT_MIN_LIMIT.g),
            b=_or_default(b_min, DEFAULT_MIN_LIMIT.b),
        )
        self._random = random_source or secure_random
        self._max_attempts = max_attempts

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any] | None = None,
        *,
        random_source: Callable[[], float] | None = None,
    ) -> "ColorGenerator":
        """Build from the loaded app config (generator section)."""
        from ..config import resolve_generator_config

        kwargs = resolve_generator_config(config or {})
        return cls(**kwargs, random_source=random_source)

    @property
    def max_limit(self) -> ChannelBounds:
        return self._max_limit

    @property
    def min_limit(self) -> ChannelBounds:
        return self._min_limit

    def get_channel_value(self, channel: str) -> int:
        """
        Random value for one channel ("r", "g" or "b") in [min, min + interval].
        Interval is max - min floored at 1, so equal or inverted bounds give min or min + 1.
        """
        max_value = self._max_limit[channel]
        min_value = self._min_limit[channel]

        accepted_interval = max(max_value - min_value, 1)
        # Round half up, not to even
        random_value = int(math.floor(self._random() * accepted_interval + 0.5))

        return min_value + random_value

    def generate_rgb(self) -> tuple[int, int, int]:
        """Draw (r, g, b) until the channel spread is within MIN_COLOR_DIFF."""
        attempts = 0
        while True:
            r, g, b = (self.get_channel_value(channel) for channel in CHANNELS)
            attempts += 1
            spread = channel_spread((r, g, b))
            if spread <= MIN_COLOR_DIFF:
                logger.debug("Accepted (%s, %s, %s) after %s attempt(s)", r, g, b, attempts)
                return r, g, b
            if self._max_attempts is not None and attempts >= self._max_attempts:
                logger.warning(
                    "No color within spread %s after %s attempts; keeping (%s, %s, %s) with spread %s",
                    MIN_COLOR_DIFF, attempts, r, g, b, spread,
                )
                return r, g, b

    def generate_color(self) -> str:
        """New random color as '#rrggbb'."""
        return to_hex(self.generate_rgb())

    def update_background(self, sink: "PresentationSink") -> str:
        """Generate a color and hand it to the sink's background and label. Returns the color."""
        new_color = self.generate_color()
        sink.set_background(new_color)
        sink.set_label(new_color)
        return new_color

    def __repr__(self) -> str:
        return f"ColorGenerator(max_limit={self._max_limit}, min_limit={self._min_limit})"

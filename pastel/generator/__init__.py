"""
Constrained random color generation (pastel bounds + channel spread limit).
"""
from .generator import ColorGenerator
from .schema import (
    CHANNELS,
    MAX_COLOR_DIFF,
    MIN_COLOR_DIFF,
    ChannelBounds,
    channel_spread,
    hex_to_rgb,
    to_hex,
)

__all__ = [
    "ColorGenerator",
    "ChannelBounds",
    "CHANNELS",
    "MIN_COLOR_DIFF",
    "MAX_COLOR_DIFF",
    "channel_spread",
    "hex_to_rgb",
    "to_hex",
]

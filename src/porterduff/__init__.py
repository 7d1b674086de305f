"""
Validated RGBA colors and Porter-Duff "over" compositing.
"""

from .color import (
    ChannelOutOfRange,
    Color,
    alpha,
    blue,
    channels,
    green,
    inRange01,
    new,
    red,
)
from .compositing import TRANSPARENT, blend, combinedAlpha
from .configuration import DEFAULT_RULES, CompositingRules
from .options import lookup

__all__ = [
    "ChannelOutOfRange",
    "Color",
    "CompositingRules",
    "DEFAULT_RULES",
    "TRANSPARENT",
    "alpha",
    "blend",
    "blue",
    "channels",
    "combinedAlpha",
    "green",
    "inRange01",
    "lookup",
    "new",
    "red",
]

# -*- test-case-name: porterduff.test.test_color -*-
from __future__ import annotations

from dataclasses import dataclass, fields
from numbers import Real

from .debugger import debug


class ChannelOutOfRange(ValueError):
    """
    A color channel was given a value that is not a real number between 0.0
    and 1.0 inclusive.
    """

    def __init__(self, channel: str, value: object) -> None:
        super().__init__(channel, value)
        self.channel = channel
        self.value = value

    def __str__(self) -> str:
        return f"{self.channel} channel value {self.value!r} not in [0.0, 1.0]"


def inRange01(x: object) -> bool:
    """
    Is C{x} a usable channel value?  Booleans are not; NaN never is, since it
    fails every comparison.
    """
    if isinstance(x, bool) or not isinstance(x, Real):
        return False
    return 0.0 <= x <= 1.0


@dataclass(frozen=True)
class Color:
    """
    A color with straight (not premultiplied) red, green, blue and alpha
    channels, each between 0.0 and 1.0.
    """

    red: float
    green: float
    blue: float
    alpha: float

    def __post_init__(self) -> None:
        for each in fields(self):
            value = getattr(self, each.name)
            if not inRange01(value):
                debug("rejecting color channel:", each.name, repr(value))
                raise ChannelOutOfRange(each.name, value)
            object.__setattr__(self, each.name, float(value))

    @classmethod
    def new(cls, red: float, green: float, blue: float, alpha: float) -> Color:
        """
        Create a L{Color}, raising L{ChannelOutOfRange} for the first channel
        that is outside of [0.0, 1.0].
        """
        return cls(red, green, blue, alpha)


new = Color.new


def red(c: Color) -> float:
    return c.red


def green(c: Color) -> float:
    return c.green


def blue(c: Color) -> float:
    return c.blue


def alpha(c: Color) -> float:
    return c.alpha


def channels(c: Color) -> tuple[float, float, float, float]:
    return (c.red, c.green, c.blue, c.alpha)

# -*- test-case-name: porterduff.test.test_compositing -*-
"""
Porter-Duff "over" compositing of single L{Color} values.
"""

from __future__ import annotations

from .color import Color
from .configuration import DEFAULT_RULES, CompositingRules
from .debugger import debug

TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


def combinedAlpha(src: Color, dst: Color) -> float:
    """
    The opacity of C{src} drawn over C{dst}.
    """
    return src.alpha + dst.alpha * (1.0 - src.alpha)


def _settle(name: str, value: float, rules: CompositingRules) -> float:
    """
    Pull a computed channel that rounding has nudged just outside [0.0, 1.0]
    back onto the boundary.  Anything further out is left alone for L{Color}
    to reject.
    """
    if -rules.tolerance <= value < 0.0:
        debug("clamping", name, value, "to 0.0")
        return 0.0
    if 1.0 < value <= 1.0 + rules.tolerance:
        debug("clamping", name, value, "to 1.0")
        return 1.0
    return value


def blend(
    src: Color,
    dst: Color,
    combined: float | None = None,
    rules: CompositingRules = DEFAULT_RULES,
) -> Color:
    """
    Composite C{src} over C{dst}.

    @param combined: the already-computed L{combinedAlpha} of C{src} and
        C{dst}, if the caller has it.

    @return: a new L{Color}; if neither color has any opacity, that is
        L{TRANSPARENT} regardless of the channels of C{dst}.
    """
    total = combinedAlpha(src, dst) if combined is None else combined
    if total <= 0.0:
        return TRANSPARENT
    srcWeight = src.alpha
    dstWeight = dst.alpha * (1.0 - src.alpha)

    def channel(name: str) -> float:
        value = (
            getattr(src, name) * srcWeight + getattr(dst, name) * dstWeight
        ) / total
        return _settle(name, value, rules)

    return Color.new(
        channel("red"),
        channel("green"),
        channel("blue"),
        _settle("alpha", total, rules),
    )

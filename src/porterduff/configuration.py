# -*- test-case-name: porterduff.test.test_configuration -*-
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Iterable

from .options import lookup

_missing = object()


@dataclass(frozen=True)
class CompositingRules:
    """
    Tunable parameters for L{porterduff.compositing.blend}.
    """

    # how far past 0.0 or 1.0 rounding error may push a computed channel
    # before we stop clamping it and treat it as a bug
    tolerance: float = 1e-9

    # upper bound on tolerance
    maxTolerance: ClassVar[float] = 1e-6

    def __post_init__(self) -> None:
        if (
            isinstance(self.tolerance, bool)
            or not isinstance(self.tolerance, (int, float))
            or not 0 <= self.tolerance <= self.maxTolerance
        ):
            raise ValueError(
                f"tolerance {self.tolerance!r} must be a number between 0 "
                f"and {self.maxTolerance}"
            )

    @classmethod
    def fromOptions(cls, options: Iterable[tuple[str, object]]) -> CompositingRules:
        """
        Build a set of rules from an association list of C{(name, value)}
        pairs; names not given keep their defaults.
        """
        options = list(options)
        known = {each.name for each in fields(cls)}
        unknown = sorted({key for key, value in options} - known)
        if unknown:
            raise ValueError(f"unknown compositing options: {unknown}")
        values = {
            name: value
            for name in known
            if (value := lookup(options, name, _missing)) is not _missing
        }
        return cls(**values)  # type:ignore[arg-type]

    def toOptions(self) -> list[tuple[str, object]]:
        return [(each.name, getattr(self, each.name)) for each in fields(self)]


DEFAULT_RULES = CompositingRules()

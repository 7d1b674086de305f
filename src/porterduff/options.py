# -*- test-case-name: porterduff.test.test_options -*-
from __future__ import annotations

from typing import Iterable, TypeVar

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")


def lookup(pairs: Iterable[tuple[K, V]], key: K, default: D) -> V | D:
    """
    Find the value associated with C{key} in an ordered list of C{(key,
    value)} pairs.  The first matching pair wins, so earlier entries shadow
    later ones; if nothing matches, return C{default}.
    """
    for eachKey, eachValue in pairs:
        if eachKey == key:
            return eachValue
    return default

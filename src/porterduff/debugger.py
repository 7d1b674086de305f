# -*- test-case-name: porterduff.test.test_debugger -*-
"""
Opt-in debug output for the compositing engine.
"""

from __future__ import annotations

from os import environ

from twisted.logger import Logger

log = Logger(namespace="porterduff")

DEBUG_MODE = bool(environ.get("PORTERDUFF_DEBUG"))


def debug(*x: object) -> None:
    """
    Emit some messages while debugging.
    """
    if DEBUG_MODE:
        log.debug("{message}", message=" ".join(str(each) for each in x))

"""Side effects combinator

Effects execute for observation only (logging, metrics, debugging)
and don't change what reaches the sink."""

from __future__ import annotations

import dataclasses

from kungfu import Result

from .._types import Effect, WarningLike, Writer
from ..scope import Scope


class TapWriter:
    """Runs the effect, then forwards the warning unchanged."""

    __slots__ = ("_upstream", "_effect")

    def __init__(self, upstream: Writer, effect: Effect) -> None:
        self._upstream = upstream
        self._effect = effect

    def write(self, warning: WarningLike, /) -> Result[None, Exception]:
        self._effect(warning)
        return self._upstream.write(warning)


def tap(scope: Scope, *, effect: Effect) -> Scope:
    """Execute sync side effect on every warning, pass it through unchanged."""
    if scope.writer is None:
        return scope
    return dataclasses.replace(scope, writer=TapWriter(scope.writer, effect))


__all__ = ("TapWriter", "tap")

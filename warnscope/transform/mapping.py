"""Map combinator"""

from __future__ import annotations

import dataclasses

from kungfu import Result

from .._types import Mapper, WarningLike, Writer
from ..scope import Scope


class MapWriter:
    """Writes fn(warning) upstream instead of the warning itself."""

    __slots__ = ("_upstream", "_fn")

    def __init__(self, upstream: Writer, fn: Mapper) -> None:
        self._upstream = upstream
        self._fn = fn

    def write(self, warning: WarningLike, /) -> Result[None, Exception]:
        return self._upstream.write(self._fn(warning))


def mapped(scope: Scope, *, fn: Mapper) -> Scope:
    """Scope whose warnings are replaced by fn(warning) before delivery."""
    if scope.writer is None:
        return scope
    return dataclasses.replace(scope, writer=MapWriter(scope.writer, fn))


__all__ = ("MapWriter", "mapped")

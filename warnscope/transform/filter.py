"""Filter combinator

Drops warnings that fail a predicate before they reach the sink."""

from __future__ import annotations

import dataclasses

from kungfu import Ok, Result

from .._types import Predicate, WarningLike, Writer
from ..scope import Scope


class FilterWriter:
    """Forwards only warnings accepted by the predicate."""

    __slots__ = ("_upstream", "_predicate")

    def __init__(self, upstream: Writer, predicate: Predicate) -> None:
        self._upstream = upstream
        self._predicate = predicate

    def write(self, warning: WarningLike, /) -> Result[None, Exception]:
        if self._predicate(warning):
            return self._upstream.write(warning)
        return Ok(None)


def filtered(scope: Scope, *, predicate: Predicate) -> Scope:
    """
    Scope that silently drops warnings failing `predicate`.

    Dropping is a success, not an error. Relative order of the
    surviving warnings is preserved.
    """
    if scope.writer is None:
        return scope
    return dataclasses.replace(scope, writer=FilterWriter(scope.writer, predicate))


__all__ = ("FilterWriter", "filtered")

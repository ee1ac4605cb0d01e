"""
Reduce combinator
=================

Buffers every warning written during a scope in a private Collector
and folds them into one summary warning on demand.
"""

from __future__ import annotations

import dataclasses
import logging

from kungfu import Error, Ok, Result

from .._errors import StreamClosedError
from .._types import Flush, Folder, WarningLike
from ..collector import Collector
from ..reader import read_all
from ..scope import Scope

logger = logging.getLogger(__name__)


def _noop() -> Result[None, Exception]:
    return Ok(None)


def reduced[A: WarningLike](
    scope: Scope,
    *,
    fn: Folder[A],
    initial: A | None = None,
) -> tuple[Scope, Flush]:
    """
    Collect warnings now, write one folded warning on flush().

    flush() drains the buffer, folds it left to right starting from
    `initial`, and writes the result upstream only if something was
    collected. It returns the upstream write result, or Ok(None) when
    nothing was written. The buffer is closed afterwards, so a second
    flush() writes nothing. Writes made through the returned scope
    after flush() fail with StreamClosedError.
    """
    upstream = scope.writer
    if upstream is None:
        return scope, _noop

    buffer = Collector()

    def flush() -> Result[None, Exception]:
        try:
            match read_all(buffer):
                case Ok([first, *rest]):
                    acc = fn(initial, first)
                    for warning in rest:
                        acc = fn(acc, warning)
                    logger.debug("Folded %d warning(s) into one", len(rest) + 1)
                    return upstream.write(acc)
                case Ok(_):
                    return Ok(None)
                case Error(StreamClosedError()):
                    # already flushed
                    return Ok(None)
                case Error(err):
                    return Error(err)
        finally:
            _ = buffer.close()

    return dataclasses.replace(scope, writer=buffer), flush


__all__ = ("reduced",)

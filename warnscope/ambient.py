"""
Ambient scope
=============

Context-local current Scope, for code that cannot take a scope
parameter. Backed by contextvars, so each thread and asyncio task
sees its own binding.

    with using(current().attach(collector)):
        do_work()  # calls ambient.warnf(...) somewhere deep inside
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from contextvars import ContextVar

from kungfu import Result

from ._errors import DeliveryError
from ._types import WarningLike
from .scope import Scope

_current: ContextVar[Scope] = ContextVar("warnscope_scope", default=Scope())


def current() -> Scope:
    """Scope bound in the current context (empty when none)."""
    return _current.get()


@contextlib.contextmanager
def using(scope: Scope) -> Iterator[Scope]:
    """Bind `scope` for the block; the previous binding comes back on exit."""
    token = _current.set(scope)
    try:
        yield scope
    finally:
        _current.reset(token)


def warn(*warnings: WarningLike) -> Result[None, DeliveryError]:
    return current().warn(*warnings)


def warnf(fmt: str, /, *args: object) -> Result[None, DeliveryError]:
    return current().warnf(fmt, *args)


__all__ = ("current", "using", "warn", "warnf")

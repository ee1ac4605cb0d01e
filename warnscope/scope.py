"""
Scope - carrier of the active writer
====================================

A Scope is an immutable value passed down a call chain. Attaching,
detaching or wrapping its writer returns a new Scope, so sibling
branches built from the same parent never see each other's pipeline.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass

from kungfu import Ok, Result

from ._errors import DeliveryError
from ._helpers import settle
from ._types import Effect, Flush, Folder, Mapper, Predicate, WarningLike, Writer
from .message import Message
from .writer.multi import MultiWriter


@dataclass(frozen=True, slots=True)
class Scope:
    """Binding of the writer active for this scope and its descendants."""

    writer: Writer | None = None

    @property
    def active(self) -> bool:
        """True when someone is listening."""
        return self.writer is not None

    # Propagation

    def attach(self, writer: Writer, /) -> Scope:
        return attach(self, writer)

    def detach(self) -> Scope:
        return detach(self)

    def warn(self, *warnings: WarningLike) -> Result[None, DeliveryError]:
        return warn(self, *warnings)

    def warnf(self, fmt: str, /, *args: object) -> Result[None, DeliveryError]:
        return warnf(self, fmt, *args)

    # Transform stages

    def map(self, fn: Mapper, /) -> Scope:
        from .transform.mapping import mapped
        return mapped(self, fn=fn)

    def filter(self, predicate: Predicate, /) -> Scope:
        from .transform.filter import filtered
        return filtered(self, predicate=predicate)

    def reduce[A: WarningLike](self, fn: Folder[A], /, *, initial: A | None = None) -> tuple[Scope, Flush]:
        from .transform.fold import reduced
        return reduced(self, fn=fn, initial=initial)

    def tap(self, effect: Effect, /) -> Scope:
        from .transform.effects import tap
        return tap(self, effect=effect)


def attach(scope: Scope, writer: Writer, /) -> Scope:
    """
    Bind `writer` for the returned scope.

    An already active writer is kept: both receive every later write,
    the existing one first.
    """
    if scope.writer is not None:
        writer = MultiWriter(scope.writer, writer)
    return dataclasses.replace(scope, writer=writer)


def detach(scope: Scope, /) -> Scope:
    """Scope whose writes go nowhere. Ancestors keep their writer."""
    if scope.writer is None:
        return scope
    return dataclasses.replace(scope, writer=None)


def warn(scope: Scope, /, *warnings: WarningLike) -> Result[None, DeliveryError]:
    """
    Write warnings, in order, to the active writer.

    Succeeds trivially when nothing is attached. Every warning is
    attempted; failures are aggregated and earlier successful writes
    stay delivered.
    """
    writer = scope.writer
    if writer is None:
        return Ok(None)
    return settle(writer.write(warning) for warning in warnings)


def _plain(arg: object) -> object:
    # ExceptionGroup has a message property but renders through str()
    if isinstance(arg, WarningLike) and not isinstance(arg, BaseException):
        return arg.message
    return arg


def warnf(scope: Scope, fmt: str, /, *args: object) -> Result[None, DeliveryError]:
    """
    Format one message %-style and warn with it.

    Warning arguments interpolate as their message text. A single
    mapping argument feeds %(name)s placeholders, as in logging.
    Nothing is formatted when no writer is attached.
    """
    if scope.writer is None:
        return Ok(None)
    if len(args) == 1 and isinstance(args[0], Mapping):
        text = fmt % {key: _plain(value) for key, value in args[0].items()}
    elif args:
        text = fmt % tuple(_plain(arg) for arg in args)
    else:
        text = fmt
    return warn(scope, Message(text))


__all__ = (
    "Scope",
    "attach",
    "detach",
    "warn",
    "warnf",
)

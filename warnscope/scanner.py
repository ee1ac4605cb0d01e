"""
Scanner
=======

Pull-style iteration over a Reader.
"""

from __future__ import annotations

import enum
import typing
from collections.abc import Iterator

from kungfu import Error, Ok

from ._errors import Exhausted
from ._types import Reader, WarningLike


class _State(enum.Enum):
    READY = enum.auto()
    EXHAUSTED = enum.auto()
    FAILED = enum.auto()


class Scanner:
    """
    Turns a Reader into an advance/inspect loop.

        scanner = Scanner(collector)
        while scanner.advance():
            handle(scanner.current)
        if scanner.error is not None:
            ...

    Exhaustion and failure are both terminal: once advance() returns
    False it keeps returning False without touching the reader again,
    and a recorded error stays the same. Not safe for concurrent use.
    """

    __slots__ = ("_reader", "_current", "_error", "_state")

    def __init__(self, reader: Reader, /) -> None:
        self._reader = reader
        self._current: WarningLike | None = None
        self._error: Exception | None = None
        self._state = _State.READY

    @property
    def current(self) -> WarningLike | None:
        """Warning produced by the last successful advance()."""
        return self._current

    @property
    def error(self) -> Exception | None:
        """First failure other than exhaustion, if any."""
        return self._error

    def advance(self) -> bool:
        """Move to the next warning. False when exhausted or failed."""
        if self._state is not _State.READY:
            return False
        match self._reader.read():
            case Ok(warning):
                self._current = warning
                return True
            case Error(Exhausted()):
                self._current = None
                self._state = _State.EXHAUSTED
                return False
            case Error(err):
                self._error = err
                self._state = _State.FAILED
                return False

    def __iter__(self) -> Iterator[WarningLike]:
        while self.advance():
            yield typing.cast(WarningLike, self._current)


__all__ = ("Scanner",)

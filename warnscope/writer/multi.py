"""
MultiWriter - fan-out combinator
================================
"""

from __future__ import annotations

from kungfu import Result

from .._errors import DeliveryError
from .._helpers import settle
from .._types import WarningLike, Writer


class MultiWriter:
    """
    Duplicates every write to all delegates.

    Delegates are called in the order given and a failing delegate
    never prevents delivery to the ones after it. Failures come back
    as one DeliveryError; use contains() to ask which sink failed.
    """

    __slots__ = ("_writers",)

    def __init__(self, *writers: Writer) -> None:
        self._writers = writers

    @property
    def writers(self) -> tuple[Writer, ...]:
        return self._writers

    def write(self, warning: WarningLike, /) -> Result[None, DeliveryError]:
        return settle(writer.write(warning) for writer in self._writers)

    def __repr__(self) -> str:
        return f"MultiWriter({', '.join(map(repr, self._writers))})"


__all__ = ("MultiWriter",)

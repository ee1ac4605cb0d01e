from __future__ import annotations

from kungfu import Error, Ok, Result

from ._errors import Exhausted
from ._types import Reader, WarningLike


def read_all(reader: Reader) -> Result[list[WarningLike], Exception]:
    """
    Read until the reader is exhausted.

    All-or-nothing: any failure other than exhaustion is returned
    unchanged and the warnings read so far are dropped.
    """
    collected: list[WarningLike] = []
    while True:
        match reader.read():
            case Ok(warning):
                collected.append(warning)
            case Error(Exhausted()):
                return Ok(collected)
            case Error(err):
                return Error(err)


__all__ = ("read_all",)

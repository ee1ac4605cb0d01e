"""
Collector
=========

Thread-safe, closeable FIFO buffer of warnings. Implements both
Writer and Reader, so it can anchor a stream on one side and be
drained with read_all() or a Scanner on the other.
"""

from __future__ import annotations

import logging
import threading
import typing
from collections import deque

from kungfu import Error, Ok, Result

from ._errors import Exhausted, StreamClosedError
from ._types import WarningLike

logger = logging.getLogger(__name__)


class Collector:
    """
    In-memory warning queue.

    Reads never block: an empty collector answers Error(Exhausted())
    right away. Once closed, the buffered warnings are discarded and
    every write, read and further close answers a fresh
    Error(StreamClosedError()), equal to CLOSED.

    Usage:
        with Collector() as collector:
            scope = attach(Scope(), collector)
            warnf(scope, "disk at %d%%", 91)
            warnings = read_all(collector).unwrap()
    """

    __slots__ = ("_buffer", "_lock", "_closed")

    def __init__(self) -> None:
        self._buffer: deque[WarningLike] = deque()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def write(self, warning: WarningLike, /) -> Result[None, StreamClosedError]:
        """Append a warning to the tail."""
        with self._lock:
            if self._closed:
                return Error(StreamClosedError())
            self._buffer.append(warning)
            return Ok(None)

    def read(self) -> Result[WarningLike, Exception]:
        """Pop the head warning."""
        with self._lock:
            if self._closed:
                return Error(StreamClosedError())
            if not self._buffer:
                return Error(Exhausted())
            return Ok(self._buffer.popleft())

    def close(self) -> Result[None, StreamClosedError]:
        """Close and discard pending warnings. Closing twice is an error."""
        with self._lock:
            if self._closed:
                return Error(StreamClosedError())
            self._closed = True
            dropped = len(self._buffer)
            self._buffer.clear()
        logger.debug("Collector closed, %d pending warning(s) discarded", dropped)
        return Ok(None)

    def __enter__(self) -> typing.Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        # Already closed inside the block is fine
        _ = self.close()

    def __repr__(self) -> str:
        with self._lock:
            state = "closed" if self._closed else f"pending={len(self._buffer)}"
        return f"Collector({state})"


__all__ = ("Collector",)

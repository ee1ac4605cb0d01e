"""
Core type definitions for warnscope.

Capabilities (Warning, Writer, Reader) and the callback aliases
used by the transform combinators.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Capabilities
# ============================================================================


@typing.runtime_checkable
class WarningLike(typing.Protocol):
    """Anything that can produce a diagnostic message."""

    @property
    def message(self) -> str: ...


class Writer(typing.Protocol):
    """Sink accepting one warning at a time."""

    def write(self, warning: WarningLike, /) -> Result[None, Exception]: ...


class Reader(typing.Protocol):
    """
    Source producing warnings one at a time.

    Three outcomes, told apart by the caller:
    - Ok(warning): the next warning
    - Error(Exhausted()): nothing more to read right now
    - Error(other): the read failed
    """

    def read(self) -> Result[WarningLike, Exception]: ...


# ============================================================================
# Callback aliases
# ============================================================================

# Predicate = keeps or drops a warning
type Predicate = Callable[[WarningLike], bool]

# Mapper = replaces a warning with another one
type Mapper = Callable[[WarningLike], WarningLike]

# Effect = observes a warning, result ignored
type Effect = Callable[[WarningLike], object]

# Folder = folds one more warning into the accumulator
type Folder[A] = Callable[[A | None, WarningLike], A]

# Flush = one-shot drain of a reduce stage
type Flush = Callable[[], Result[None, Exception]]

__all__ = (
    # Capabilities
    "WarningLike",
    "Writer",
    "Reader",
    # Callbacks
    "Predicate",
    "Mapper",
    "Effect",
    "Folder",
    "Flush",
)

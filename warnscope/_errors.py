from __future__ import annotations

from collections.abc import Sequence


class _Signal(Exception):
    """Stateless failure: every instance of a signal class compares equal."""

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))


class StreamClosedError(_Signal):
    """The warning stream is permanently closed."""

    def __init__(self) -> None:
        super().__init__("warning stream is closed")


class Exhausted(_Signal):
    """Reader has no more warnings right now. Not a failure."""

    def __init__(self) -> None:
        super().__init__("no more warnings")


class DeliveryError(ExceptionGroup):
    """One or more independent warning writes failed."""

    def derive(self, excs: Sequence[Exception]) -> DeliveryError:  # type: ignore[override]
        return DeliveryError(self.message, excs)


# Reference values for equality checks. Readers and writers return
# fresh instances, never these.
CLOSED = StreamClosedError()
EXHAUSTED = Exhausted()


def join(errors: Sequence[Exception]) -> DeliveryError | None:
    """Aggregate failures into one DeliveryError, None when there are none."""
    if not errors:
        return None
    return DeliveryError(f"{len(errors)} warning write(s) failed", list(errors))


def contains(
    error: BaseException | None,
    target: BaseException | type[BaseException],
) -> bool:
    """
    Test whether `error` is, or transitively aggregates, `target`.

    Instances are matched with ==, classes with isinstance.
    Nested exception groups are searched depth-first.
    """
    if error is None:
        return False
    if isinstance(target, type):
        if isinstance(error, target):
            return True
    elif error == target:
        return True
    if isinstance(error, BaseExceptionGroup):
        return any(contains(inner, target) for inner in error.exceptions)
    return False


__all__ = (
    "CLOSED",
    "EXHAUSTED",
    "DeliveryError",
    "Exhausted",
    "StreamClosedError",
    "contains",
    "join",
)

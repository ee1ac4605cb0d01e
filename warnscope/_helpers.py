"""Internal helpers shared by writers and scope entry points."""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Error, Ok, Result

from ._errors import DeliveryError, join


def settle(results: Iterable[Result[None, Exception]]) -> Result[None, DeliveryError]:
    """
    Drain write results in order and aggregate every failure.

    `results` is consumed fully, so a lazy iterable of writes never
    short-circuits on the first failure.
    """
    errors: list[Exception] = []
    for result in results:
        match result:
            case Error(err):
                errors.append(err)
            case Ok(_):
                pass
    aggregate = join(errors)
    if aggregate is None:
        return Ok(None)
    return Error(aggregate)


__all__ = ("settle",)

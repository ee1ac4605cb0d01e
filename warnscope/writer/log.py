"""
LogWriter - forwards warnings to the logging module
===================================================
"""

from __future__ import annotations

import logging

from kungfu import Ok, Result

from .._types import WarningLike
from ..config import get_settings


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    levels = logging.getLevelNamesMapping()
    if level.upper() not in levels:
        raise ValueError(f"unknown log level: {level!r}")
    return levels[level.upper()]


class LogWriter:
    """
    Writer emitting one log record per warning.

    Logger and level default to the WARNSCOPE_LOGGER_NAME and
    WARNSCOPE_LOG_LEVEL settings. Never fails: filtering and
    handler errors are the logging module's business.
    """

    __slots__ = ("_logger", "_level")

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        level: int | str | None = None,
    ) -> None:
        settings = get_settings()
        self._logger = logger if logger is not None else logging.getLogger(settings.logger_name)
        self._level = _resolve_level(level if level is not None else settings.log_level)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def level(self) -> int:
        return self._level

    def write(self, warning: WarningLike, /) -> Result[None, Exception]:
        self._logger.log(self._level, "%s", warning.message)
        return Ok(None)


__all__ = ("LogWriter",)

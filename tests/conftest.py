"""Shared test fixtures for warnscope."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from kungfu import Error, Ok, Result

from warnscope import Exhausted, WarningLike
from warnscope.config import get_settings


class RecordingWriter:
    """Writer keeping every accepted warning, or failing with `result`."""

    def __init__(self, result: Exception | None = None) -> None:
        self.buf: list[WarningLike] = []
        self.calls = 0
        self.result = result

    def write(self, warning: WarningLike, /) -> Result[None, Exception]:
        self.calls += 1
        if self.result is not None:
            return Error(self.result)
        self.buf.append(warning)
        return Ok(None)

    @property
    def messages(self) -> list[str]:
        return [w.message for w in self.buf]


class ScriptedReader:
    """Reader replaying a fixed list of outcomes, then exhaustion forever."""

    def __init__(self, outcomes: list[Result[WarningLike, Exception]]) -> None:
        self._outcomes = list(outcomes)
        self.reads = 0

    def read(self) -> Result[WarningLike, Exception]:
        self.reads += 1
        if not self._outcomes:
            return Error(Exhausted())
        return self._outcomes.pop(0)


def _ok_value(result: Result[Any, Any]) -> Any:
    match result:
        case Ok(value):
            return value
        case Error(err):
            pytest.fail(f"expected Ok, got Error({err!r})")


def _err_value(result: Result[Any, Any]) -> Any:
    match result:
        case Error(err):
            return err
        case Ok(value):
            pytest.fail(f"expected Error, got Ok({value!r})")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from WARNSCOPE_* variables and the settings cache."""
    for name in ("WARNSCOPE_LOG_LEVEL", "WARNSCOPE_LOGGER_NAME", "WARNSCOPE_JSON_ENSURE_ASCII"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recorder() -> RecordingWriter:
    """Provide a writer that accepts and records everything."""
    return RecordingWriter()


@pytest.fixture
def make_writer() -> Callable[..., RecordingWriter]:
    """Provide a factory for recording writers; pass an error to make one that always fails."""
    return RecordingWriter


@pytest.fixture
def scripted_reader() -> Callable[[list[Result[WarningLike, Exception]]], ScriptedReader]:
    """Provide a factory for readers replaying scripted outcomes."""
    return ScriptedReader


@pytest.fixture
def ok_value() -> Callable[[Result[Any, Any]], Any]:
    """Unwrap an Ok, failing the test on Error."""
    return _ok_value


@pytest.fixture
def err_value() -> Callable[[Result[Any, Any]], Any]:
    """Unwrap an Error, failing the test on Ok."""
    return _err_value

from __future__ import annotations

import logging
import threading

import pytest

from m3uscan.dispatch import ImmediateDispatcher, ParseResult, SerialDispatcher, default_dispatcher
from m3uscan.errors import InvalidSource
from m3uscan.models import Playlist


def test_parse_result_unwrap() -> None:
    playlist = Playlist(())

    assert ParseResult(playlist=playlist).unwrap() is playlist
    assert ParseResult(playlist=playlist).ok


def test_parse_result_unwrap_raises_error() -> None:
    result = ParseResult(error=InvalidSource())

    assert not result.ok
    with pytest.raises(InvalidSource):
        result.unwrap()


def test_immediate_dispatcher_runs_inline() -> None:
    calls: list[tuple[int, str]] = []

    ImmediateDispatcher().call(lambda value: calls.append((value, threading.current_thread().name)), 7)

    assert calls == [(7, threading.current_thread().name)]


def test_serial_dispatcher_runs_jobs_in_order() -> None:
    dispatcher = SerialDispatcher(name="test-serial")
    seen: list[int] = []
    threads: set[str] = set()

    def _record(value: int) -> None:
        seen.append(value)
        threads.add(threading.current_thread().name)

    for value in range(20):
        dispatcher.call(_record, value)
    dispatcher.shutdown(timeout=5.0)

    assert seen == list(range(20))
    assert threads == {"test-serial"}
    assert not dispatcher.thread.is_alive()


def test_serial_dispatcher_survives_failing_job(caplog) -> None:
    dispatcher = SerialDispatcher()
    seen: list[str] = []

    def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR, logger="m3uscan.dispatch"):
        dispatcher.call(_boom)
        dispatcher.call(seen.append, "after")
        dispatcher.shutdown(timeout=5.0)

    assert seen == ["after"]
    assert any("Unhandled error" in record.getMessage() for record in caplog.records)


def test_default_dispatcher_is_shared() -> None:
    assert default_dispatcher() is default_dispatcher()


def test_parse_result_unwrap_without_outcome() -> None:
    with pytest.raises(ValueError):
        ParseResult().unwrap()

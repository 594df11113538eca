"""Completion delivery for parses running off the caller's thread.

The parse itself never blocks; this module only moves its outcome from the
worker that produced it to the context the caller asked for.
"""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from m3uscan.models import Playlist


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one background parse: either a playlist or the error raised."""

    playlist: Optional[Playlist] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Playlist:
        if self.error is not None:
            raise self.error
        if self.playlist is None:
            raise ValueError("ParseResult holds neither a playlist nor an error")
        return self.playlist


class Dispatcher(Protocol):
    def call(self, func: Callable[..., Any], *args: Any) -> None:
        ...


class ImmediateDispatcher:
    """Run completions on whichever thread finished the parse."""

    def call(self, func: Callable[..., Any], *args: Any) -> None:
        func(*args)


@dataclass(frozen=True)
class _Job:
    func: Callable[..., Any]
    args: tuple


class SerialDispatcher:
    """Single-thread worker running queued completions one at a time."""

    def __init__(self, name: str = "m3uscan-callbacks") -> None:
        self._queue: queue.Queue[_Job | None] = queue.Queue()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    @property
    def thread(self) -> threading.Thread:
        return self._thread

    def call(self, func: Callable[..., Any], *args: Any) -> None:
        self._queue.put(_Job(func, args))

    def shutdown(self, *, timeout: float = 1.0) -> None:
        """Stop the worker after already queued completions have run."""

        self._queue.put(None)
        self._thread.join(timeout=max(0.0, float(timeout)))

    def _run(self) -> None:
        while True:
            job = self._queue.get()
            if job is None:
                return
            try:
                job.func(*job.args)
            except Exception:
                logger.exception("Unhandled error in playlist completion %r", job.func)


_default_dispatcher: SerialDispatcher | None = None
_default_lock = threading.Lock()


def default_dispatcher() -> SerialDispatcher:
    """Return the shared dispatcher, starting it on first use."""

    global _default_dispatcher
    with _default_lock:
        if _default_dispatcher is None or not _default_dispatcher.thread.is_alive():
            _default_dispatcher = SerialDispatcher()
        return _default_dispatcher


__all__ = ["Dispatcher", "ImmediateDispatcher", "ParseResult", "SerialDispatcher", "default_dispatcher"]

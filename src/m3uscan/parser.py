"""Public entry point turning playlist sources into :class:`Playlist` objects."""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Iterator, Optional

from m3uscan.config import SettingsManager, configure_from_settings
from m3uscan.dispatch import Dispatcher, ParseResult, default_dispatcher
from m3uscan.models import Media, ParserOptions, Playlist
from m3uscan.patterns import extract_id
from m3uscan.scanner import scan_text
from m3uscan.source import DEFAULT_ENCODING, SourceLike, normalize_source


logger = logging.getLogger(__name__)

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _default_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(thread_name_prefix="m3uscan-parse")
        return _executor


class PlaylistParser:
    """Parse M3U/M3U8 text into playlists.

    ``options`` only affect how names are computed. Instances hold no state
    between calls and can be shared across threads.
    """

    def __init__(self, options: ParserOptions = ParserOptions(0), *, encoding: str = DEFAULT_ENCODING) -> None:
        self.options = options
        self.encoding = encoding

    @classmethod
    def from_settings(cls, settings: SettingsManager) -> "PlaylistParser":
        """Build a parser from ``settings``, applying its language and logging sections too."""

        configure_from_settings(settings)
        return cls(settings.get_parser_options(), encoding=settings.get_encoding())

    def __repr__(self) -> str:
        return f"PlaylistParser(options={self.options!r}, encoding={self.encoding!r})"

    def iter_medias(self, source: SourceLike) -> Iterator[Media]:
        """Validate ``source`` up front, then lazily yield its entries."""

        text = normalize_source(source, encoding=self.encoding)
        return scan_text(text, self.options)

    def parse(self, source: SourceLike) -> Playlist:
        playlist = Playlist(tuple(self.iter_medias(source)))
        logger.debug("Parsed %d medias (options=%s)", len(playlist), self.options)
        return playlist

    def walk(self, source: SourceLike, handler: Callable[[Media], None]) -> None:
        """Call ``handler`` with each entry as soon as its pair completes."""

        for media in self.iter_medias(source):
            handler(media)

    def parse_in_background(
        self,
        source: SourceLike,
        completion: Callable[[ParseResult], None],
        *,
        executor: Optional[Executor] = None,
        dispatcher: Optional[Dispatcher] = None,
    ) -> Future:
        """Parse on ``executor`` and deliver the outcome through ``dispatcher``.

        Errors are handed to ``completion`` inside the :class:`ParseResult`
        rather than raised. The returned future resolves to the same result.
        """

        executor = executor or _default_executor()
        dispatcher = dispatcher or default_dispatcher()

        def _job() -> ParseResult:
            try:
                result = ParseResult(playlist=self.parse(source))
            except Exception as exc:  # pylint: disable=broad-except
                logger.debug("Background parse failed: %s", exc)
                result = ParseResult(error=exc)
            dispatcher.call(completion, result)
            return result

        return executor.submit(_job)

    async def parse_async(self, source: SourceLike, *, executor: Optional[Executor] = None) -> Playlist:
        """Run :meth:`parse` off the event loop thread.

        Cancelling before the worker picks the job up skips the scan; a scan
        already running is not interrupted.
        """

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(executor or _default_executor(), self.parse, source)

    @staticmethod
    def extract_id(url: str) -> str:
        return extract_id(url)


__all__ = ["PlaylistParser"]

"""Obtain playlist text from a source and validate the ``#EXTM3U`` header."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Union, runtime_checkable

from m3uscan.errors import InvalidSource, InvalidSourcePrefix
from m3uscan.patterns import FILE_PREFIX, split_lines


logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8-sig"


@runtime_checkable
class PlaylistSource(Protocol):
    """Anything able to hand over the raw playlist text."""

    def raw_string(self) -> Optional[str]:
        ...


SourceLike = Union[str, bytes, bytearray, memoryview, PlaylistSource]


def read_raw_string(source: SourceLike | None, *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the text held by ``source`` or raise :class:`InvalidSource`."""

    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        try:
            return bytes(source).decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            logger.debug("Unable to decode playlist bytes as %s: %s", encoding, exc)
            raise InvalidSource() from exc
    if isinstance(source, PlaylistSource):
        try:
            text = source.raw_string()
        except UnicodeDecodeError as exc:
            raise InvalidSource() from exc
        if text is None:
            raise InvalidSource()
        return str(text)
    raise InvalidSource()


def strip_header(raw: str) -> str:
    """Remove the ``#EXTM3U`` header and anything in front of it."""

    if raw.startswith(FILE_PREFIX):
        return raw[len(FILE_PREFIX):]
    index = raw.find(FILE_PREFIX)
    if index < 0:
        lines = split_lines(raw)
        raise InvalidSourcePrefix(lines[0] if lines else "")
    logger.debug("Playlist header found at offset %d, discarding leading content", index)
    return raw[index + len(FILE_PREFIX):]


def normalize_source(source: SourceLike | None, *, encoding: str = DEFAULT_ENCODING) -> str:
    return strip_header(read_raw_string(source, encoding=encoding))

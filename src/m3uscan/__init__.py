"""Parse IPTV-style M3U/M3U8 playlists into movies, series episodes and live channels."""

from __future__ import annotations

from m3uscan.dispatch import ImmediateDispatcher, ParseResult, SerialDispatcher
from m3uscan.errors import InvalidSource, InvalidSourcePrefix, MissingDuration, ParsingError
from m3uscan.models import DURATION_LIVE, DURATION_UNKNOWN, Attributes, Media, MediaKind, ParserOptions, Playlist
from m3uscan.parser import PlaylistParser
from m3uscan.source import PlaylistSource

__version__ = "1.0.0"

__all__ = [
    "Attributes",
    "DURATION_LIVE",
    "DURATION_UNKNOWN",
    "ImmediateDispatcher",
    "InvalidSource",
    "InvalidSourcePrefix",
    "Media",
    "MediaKind",
    "MissingDuration",
    "ParseResult",
    "ParserOptions",
    "ParsingError",
    "Playlist",
    "PlaylistParser",
    "PlaylistSource",
    "SerialDispatcher",
]

"""Build media metadata and kind from a paired ``#EXTINF`` line and URL."""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple
from urllib.parse import urlsplit

from m3uscan.models import DURATION_LIVE, DURATION_UNKNOWN, Attributes, MediaKind, ParserOptions
from m3uscan.patterns import (
    LIVE_PATH_RE,
    MOVIE_PATH_RE,
    SERIES_PATH_RE,
    extract_duration,
    extract_group_title,
    extract_name,
    extract_tvg_name,
    match_season_episode,
)


class Metadata(NamedTuple):
    duration: int
    attributes: Attributes
    name: str


def parse_season_episode(
    text: str, options: ParserOptions = ParserOptions(0)
) -> Tuple[str, Optional[Tuple[int, int]]]:
    """Split ``"Show S01E02"`` into the name and its ``(season, episode)`` pair.

    With ``REMOVE_SERIES_INFO_FROM_TEXT`` the marker (leading space included)
    is cut out of the returned name.
    """

    found = match_season_episode(text)
    if found is None:
        return text, None
    season, episode, (start, end) = found
    name = text
    if ParserOptions.REMOVE_SERIES_INFO_FROM_TEXT in options:
        name = text[:start] + text[end:]
    return name, (season, episode)


def parse_attributes(line: str, options: ParserOptions = ParserOptions(0)) -> Attributes:
    name: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None

    tvg_name = extract_tvg_name(line)
    if tvg_name is not None:
        name, season_episode = parse_season_episode(tvg_name, options)
        if season_episode is not None:
            season, episode = season_episode

    group_title = extract_group_title(line)
    if group_title is not None and season is not None:
        # Episodic group titles repeat the show name carried by tvg-name.
        group_title = name

    return Attributes(
        name=name,
        group_title=group_title,
        season_number=season,
        episode_number=episode,
    )


def parse_metadata(line: str, options: ParserOptions = ParserOptions(0)) -> Metadata:
    duration = extract_duration(line)
    return Metadata(
        duration=DURATION_UNKNOWN if duration is None else duration,
        attributes=parse_attributes(line, options),
        name=extract_name(line),
    )


def classify_kind(url: str, duration: int = 0) -> MediaKind:
    path = urlsplit(url).path
    if MOVIE_PATH_RE.search(path):
        return MediaKind.MOVIE
    if SERIES_PATH_RE.search(path):
        return MediaKind.SERIES
    if LIVE_PATH_RE.search(path) or duration == DURATION_LIVE:
        return MediaKind.LIVE
    return MediaKind.UNKNOWN

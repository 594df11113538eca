"""Regular expressions for the M3U metadata dialect and thin helpers around them."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple
from urllib.parse import urlsplit

FILE_PREFIX = "#EXTM3U"
INFO_PREFIX = "#EXTINF:"
DIRECTIVE_PREFIX = "#EXT"

DURATION_RE = re.compile(r"#EXTINF:\s*(-?\d+)")
NAME_RE = re.compile(r".*,(.+?)$")

MOVIE_PATH_RE = re.compile(r"/movie/")
SERIES_PATH_RE = re.compile(r"/series/")
LIVE_PATH_RE = re.compile(r"/live/")

# Only the letters are case-insensitive.
SEASON_EPISODE_RE = re.compile(r" (?i:s)(\d+) ?(?i:e)(\d+)")
TVG_NAME_RE = re.compile(r'tvg-name="(.?|.+?)"')
GROUP_TITLE_RE = re.compile(r'group-title="(.?|.+?)"')

_WHITESPACE_RE = re.compile(r"\s")
# Line ends only; form feeds and other separators stay inside the line.
LINE_BREAK_RE = re.compile(r"\r\n|[\n\r\x85\u2028\u2029]")


def split_lines(text: str) -> List[str]:
    lines = LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_info_line(line: str) -> bool:
    return line.startswith(INFO_PREFIX)


def is_directive(line: str) -> bool:
    return line.startswith(DIRECTIVE_PREFIX)


def parse_url(line: str) -> Optional[str]:
    """Return ``line`` when it reads as a media locator, otherwise ``None``.

    Blank lines, comments and text containing whitespace are not locators.
    """

    if not line or line.startswith("#") or _WHITESPACE_RE.search(line):
        return None
    try:
        urlsplit(line)
    except ValueError:
        return None
    return line


def _first_group(pattern: re.Pattern[str], text: str) -> Optional[str]:
    match = pattern.search(text)
    if match is None:
        return None
    return match.group(1)


def extract_duration(line: str) -> Optional[int]:
    value = _first_group(DURATION_RE, line)
    return int(value) if value is not None else None


def extract_name(line: str) -> str:
    return _first_group(NAME_RE, line) or ""


def extract_tvg_name(line: str) -> Optional[str]:
    return _first_group(TVG_NAME_RE, line)


def extract_group_title(line: str) -> Optional[str]:
    return _first_group(GROUP_TITLE_RE, line)


def extract_id(url: str) -> str:
    """Return the last URL path component up to its first dot.

    ``http://host/series/user/pass/1234.mkv`` gives ``"1234"``.
    """

    path = urlsplit(url).path.rstrip("/")
    last_component = path.rsplit("/", 1)[-1]
    return last_component.split(".", 1)[0]


def match_season_episode(text: str) -> Optional[Tuple[int, int, Tuple[int, int]]]:
    """Return ``(season, episode, span)`` for the first marker in ``text``."""

    match = SEASON_EPISODE_RE.search(text)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2)), match.span()

"""Errors raised while turning a playlist source into a :class:`Playlist`."""

from __future__ import annotations

from m3uscan.i18n import gettext as _


class ParsingError(Exception):
    """Base class for all parser failures."""

    def __str__(self) -> str:
        return self.message

    @property
    def message(self) -> str:
        return super().__str__()


class InvalidSource(ParsingError):
    """No text could be obtained from the source."""

    @property
    def message(self) -> str:
        return _("The playlist is invalid")


class InvalidSourcePrefix(ParsingError):
    """Text was obtained but the ``#EXTM3U`` header is missing.

    ``prefix`` holds the first line of the text for diagnostics.
    """

    def __init__(self, prefix: str) -> None:
        super().__init__(prefix)
        self.prefix = prefix

    @property
    def message(self) -> str:
        text = _("The playlist's prefix is invalid")
        if self.prefix:
            text += f" - {self.prefix}"
        return text


class MissingDuration(ParsingError):
    """Metadata line without a parsable duration.

    Not raised by :class:`~m3uscan.parser.PlaylistParser`, which substitutes
    ``DURATION_UNKNOWN`` instead.
    """

    def __init__(self, line: int, raw: str) -> None:
        super().__init__(line, raw)
        self.line = line
        self.raw = raw

    @property
    def message(self) -> str:
        return _("Missing duration in line") + f"{self.line} \"{self.raw}\""


__all__ = ["InvalidSource", "InvalidSourcePrefix", "MissingDuration", "ParsingError"]

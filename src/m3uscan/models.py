"""Playlist data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

DURATION_UNKNOWN = -9999
DURATION_LIVE = -1


class MediaKind(Enum):
    MOVIE = "movie"
    SERIES = "series"
    LIVE = "live"
    UNKNOWN = "unknown"


class ParserOptions(Flag):
    """Options changing how names are computed; never which entries are produced."""

    REMOVE_SERIES_INFO_FROM_TEXT = 1 << 0
    # Last URL path component without its extension.
    EXTRACT_ID_FROM_URL = 1 << 1
    ALL = REMOVE_SERIES_INFO_FROM_TEXT | EXTRACT_ID_FROM_URL

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "ParserOptions":
        """Build a flag set from names such as ``"remove_series_info_from_text"``.

        Raises ``ValueError`` for unknown names.
        """

        result = cls(0)
        for name in names:
            key = str(name).strip().upper()
            if not key:
                continue
            try:
                result |= cls[key]
            except KeyError:
                raise ValueError(f"Unknown parser option: {name}") from None
        return result


@dataclass(frozen=True)
class Attributes:
    name: Optional[str] = None
    group_title: Optional[str] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "group_title": self.group_title,
            "season_number": self.season_number,
            "episode_number": self.episode_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attributes":
        return cls(
            name=data.get("name"),
            group_title=data.get("group_title"),
            season_number=data.get("season_number"),
            episode_number=data.get("episode_number"),
        )


@dataclass(frozen=True)
class Media:
    attributes: Attributes
    kind: MediaKind
    name: str
    url: str
    duration: int = DURATION_UNKNOWN
    line_in_m3u: Optional[int] = None

    @property
    def is_episode(self) -> bool:
        return self.attributes.season_number is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "attributes": self.attributes.to_dict(),
            "kind": self.kind.value,
            "name": self.name,
            "url": self.url,
            "duration": self.duration,
            "line_in_m3u": self.line_in_m3u,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Media":
        return cls(
            attributes=Attributes.from_dict(data.get("attributes") or {}),
            kind=MediaKind(data.get("kind", MediaKind.UNKNOWN.value)),
            name=str(data.get("name", "")),
            url=str(data["url"]),
            duration=int(data.get("duration", DURATION_UNKNOWN)),
            line_in_m3u=data.get("line_in_m3u"),
        )


@dataclass(frozen=True)
class Playlist:
    medias: Tuple[Media, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple.
        if not isinstance(self.medias, tuple):
            object.__setattr__(self, "medias", tuple(self.medias))

    def __iter__(self) -> Iterator[Media]:
        return iter(self.medias)

    def __len__(self) -> int:
        return len(self.medias)

    def __getitem__(self, index: int) -> Media:
        return self.medias[index]

    def by_kind(self, kind: MediaKind) -> List[Media]:
        return [media for media in self.medias if media.kind is kind]

    def in_group(self, group_title: str) -> List[Media]:
        return [media for media in self.medias if media.attributes.group_title == group_title]

    def group_titles(self) -> List[str]:
        """Return group titles in first-seen order, skipping entries without one."""

        seen: Dict[str, None] = {}
        for media in self.medias:
            title = media.attributes.group_title
            if title is not None and title not in seen:
                seen[title] = None
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        return {"medias": [media.to_dict() for media in self.medias]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        return cls(tuple(Media.from_dict(item) for item in data.get("medias", [])))

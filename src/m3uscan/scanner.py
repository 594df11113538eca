"""Line scanner pairing ``#EXTINF`` lines with the URL lines that follow them."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from m3uscan.metadata import classify_kind, parse_metadata
from m3uscan.models import Media, ParserOptions
from m3uscan.patterns import is_directive, is_info_line, parse_url, split_lines


logger = logging.getLogger(__name__)


def build_media(line_number: int, metadata_line: str, url: str, options: ParserOptions) -> Media:
    metadata = parse_metadata(metadata_line, options)
    return Media(
        attributes=metadata.attributes,
        kind=classify_kind(url, metadata.duration),
        name=metadata.name,
        url=url,
        duration=metadata.duration,
        line_in_m3u=line_number,
    )


def scan_lines(lines: Iterable[str], options: ParserOptions = ParserOptions(0)) -> Iterator[Media]:
    """Yield one :class:`Media` per completed metadata/URL pair, in source order.

    Every line advances the counter, so ``line_in_m3u`` is the position of the
    metadata line in ``lines``. A metadata line replaced by another one before
    a URL shows up is dropped, as is a trailing unpaired one.
    """

    last_metadata_line: Optional[str] = None
    last_metadata_number = 0
    last_url: Optional[str] = None

    for line_number, line in enumerate(lines):
        if is_info_line(line):
            if last_metadata_line is not None:
                logger.debug("Dropping line %d without URL: %s", last_metadata_number, last_metadata_line)
            last_metadata_line = line
            last_metadata_number = line_number
        elif not is_directive(line):
            url = parse_url(line)
            if url is not None:
                last_url = url

        if last_metadata_line is not None and last_url is not None:
            yield build_media(last_metadata_number, last_metadata_line, last_url, options)
            last_metadata_line = None
            last_url = None

    if last_metadata_line is not None:
        logger.debug("Dropping trailing line %d without URL: %s", last_metadata_number, last_metadata_line)


def scan_text(text: str, options: ParserOptions = ParserOptions(0)) -> Iterator[Media]:
    return scan_lines(split_lines(text), options)

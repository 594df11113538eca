from __future__ import annotations

import pytest

from m3uscan.errors import InvalidSource, InvalidSourcePrefix
from m3uscan.source import normalize_source, read_raw_string, strip_header


class _TextSource:
    def __init__(self, text: str | None) -> None:
        self._text = text

    def raw_string(self) -> str | None:
        return self._text


def test_strip_header_at_start() -> None:
    assert strip_header("#EXTM3U\n#EXTINF:-1,A\nhttp://a") == "\n#EXTINF:-1,A\nhttp://a"


def test_strip_header_after_leading_content() -> None:
    assert strip_header("garbage line\n#EXTM3U\nhttp://a") == "\nhttp://a"


def test_strip_header_missing_reports_first_line() -> None:
    with pytest.raises(InvalidSourcePrefix) as excinfo:
        strip_header("#EXTINF:-1,A\nhttp://a\n")

    assert excinfo.value.prefix == "#EXTINF:-1,A"


def test_strip_header_empty_text() -> None:
    with pytest.raises(InvalidSourcePrefix) as excinfo:
        strip_header("")

    assert excinfo.value.prefix == ""


def test_read_raw_string_decodes_bytes_with_bom() -> None:
    data = "\ufeff#EXTM3U\n#EXTINF:-1,Żółw\nhttp://a".encode("utf-8")

    assert read_raw_string(data) == "#EXTM3U\n#EXTINF:-1,Żółw\nhttp://a"


def test_read_raw_string_undecodable_bytes() -> None:
    with pytest.raises(InvalidSource) as excinfo:
        read_raw_string(b"\xff\xfe\xfa#EXTM3U")

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_read_raw_string_custom_encoding() -> None:
    data = "#EXTM3U\n#EXTINF:-1,Café\nhttp://a".encode("latin-1")

    assert "Café" in read_raw_string(data, encoding="latin-1")


def test_read_raw_string_protocol_source() -> None:
    assert read_raw_string(_TextSource("#EXTM3U")) == "#EXTM3U"


@pytest.mark.parametrize("source", [None, _TextSource(None), 42])
def test_read_raw_string_without_text(source) -> None:
    with pytest.raises(InvalidSource):
        read_raw_string(source)


def test_normalize_source_combines_read_and_strip() -> None:
    assert normalize_source(b"#EXTM3U\nhttp://a") == "\nhttp://a"

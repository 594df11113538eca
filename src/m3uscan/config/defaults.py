"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

from m3uscan.source import DEFAULT_ENCODING

DEFAULT_CONFIG: Dict[str, Any] = {
    "general": {
        "language": "en",
    },
    "parser": {
        "options": [],
        "encoding": DEFAULT_ENCODING,
    },
    "diagnostics": {
        "log_level": "WARNING",
        "log_folder": "",
    },
}

"""Environment lookups: where settings live and log level overrides."""

from __future__ import annotations

import os
import sys
from pathlib import Path

CONFIG_FILE_NAME = "settings.yaml"


def user_config_dir() -> Path:
    """Per-user settings directory (``%APPDATA%`` on Windows, XDG elsewhere)."""

    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "m3uscan"
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base_dir = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base_dir / "m3uscan"


def resolve_config_path(explicit_path: Path | None = None) -> Path:
    """Settings file location.

    ``M3USCAN_CONFIG_PATH`` beats ``M3USCAN_CONFIG_DIR``, both beat
    ``explicit_path``; without any of them the per-user directory is used.
    """

    env_path = os.environ.get("M3USCAN_CONFIG_PATH", "").strip()
    if env_path:
        return Path(env_path).expanduser()
    env_dir = os.environ.get("M3USCAN_CONFIG_DIR", "").strip()
    if env_dir:
        return Path(env_dir).expanduser() / CONFIG_FILE_NAME
    if explicit_path is not None:
        return Path(explicit_path)
    return user_config_dir() / CONFIG_FILE_NAME


def log_level_override() -> str | None:
    """Return the ``LOGLEVEL`` environment value, if set."""

    value = os.environ.get("LOGLEVEL", "").strip()
    return value or None

"""Logging setup for applications embedding the parser."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from m3uscan.env import log_level_override


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Handlers added by configure_logging, per logger name.
_installed: Dict[str, List[logging.Handler]] = {}


def resolve_level(level_override: Optional[str] = None) -> int:
    level_name = (log_level_override() or level_override or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING


def _remove_installed(target: logging.Logger) -> None:
    for handler in _installed.pop(target.name, []):
        target.removeHandler(handler)
        handler.close()


def configure_logging(
    level_override: Optional[str] = None,
    *,
    log_folder: Optional[Path] = None,
    logger_name: str = "m3uscan",
) -> Optional[Path]:
    """Attach handlers to the package logger.

    ``LOGLEVEL`` from the environment wins over ``level_override``. When
    ``log_folder`` is given, records also go to a timestamped file inside it;
    its path is returned. Calling again replaces the handlers installed by the
    previous call; handlers added by the application are left alone.
    """

    level = resolve_level(level_override)
    target = logging.getLogger(logger_name)
    _remove_installed(target)
    target.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    target.addHandler(stream_handler)
    handlers: List[logging.Handler] = [stream_handler]
    _installed[target.name] = handlers

    if log_folder is None:
        return None

    try:
        log_folder.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        log_path = log_folder / f"m3uscan-{timestamp}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        target.warning("Unable to open log file in %s: %s", log_folder, exc)
        return None
    file_handler.setFormatter(formatter)
    target.addHandler(file_handler)
    handlers.append(file_handler)
    target.info("Writing log to %s", log_path)
    return log_path

"""YAML-backed parser settings."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .defaults import DEFAULT_CONFIG
from m3uscan import i18n
from m3uscan.env import resolve_config_path
from m3uscan.log import configure_logging
from m3uscan.models import ParserOptions


logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def merge_settings(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``defaults`` updated by ``overrides``, recursing into nested sections."""

    merged: Dict[str, Any] = copy.deepcopy(defaults)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


@dataclass
class SettingsManager:
    """Parser configuration stored in a YAML file, with defaults for missing keys."""

    config_path: Optional[Path] = None

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(self.config_path)
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        user_config: Any = {}
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
        if not isinstance(user_config, dict):
            logger.warning("Ignoring malformed settings file %s", self.config_path)
            user_config = {}
        self._data = merge_settings(DEFAULT_CONFIG, user_config)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=True, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def _section(self, name: str) -> Dict[str, Any]:
        section = self._data.get(name)
        return section if isinstance(section, dict) else {}

    def get_language(self) -> str:
        value = self._section("general").get("language")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_CONFIG["general"]["language"]

    def set_language(self, language: str) -> None:
        self._data.setdefault("general", {})["language"] = str(language)

    def get_option_names(self) -> List[str]:
        value = self._section("parser").get("options")
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return list(DEFAULT_CONFIG["parser"]["options"])
        return [str(item) for item in value]

    def get_parser_options(self) -> ParserOptions:
        try:
            return ParserOptions.from_names(self.get_option_names())
        except ValueError as exc:
            logger.warning("Ignoring parser options from %s: %s", self.config_path, exc)
            return ParserOptions(0)

    def set_parser_options(self, options: ParserOptions) -> None:
        names = [member.name.lower() for member in ParserOptions if member in options and member is not ParserOptions.ALL]
        self._data.setdefault("parser", {})["options"] = names

    def get_encoding(self) -> str:
        value = self._section("parser").get("encoding")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_CONFIG["parser"]["encoding"]

    def set_encoding(self, encoding: str) -> None:
        self._data.setdefault("parser", {})["encoding"] = str(encoding)

    def get_log_level(self) -> str:
        value = str(self._section("diagnostics").get("log_level", "")).strip().upper()
        if value in _LOG_LEVELS:
            return value
        return DEFAULT_CONFIG["diagnostics"]["log_level"]

    def set_log_level(self, level: str) -> None:
        value = str(level).strip().upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {level}")
        self._data.setdefault("diagnostics", {})["log_level"] = value

    def get_log_folder(self) -> Optional[Path]:
        value = self._section("diagnostics").get("log_folder")
        if isinstance(value, str) and value.strip():
            return Path(value.strip())
        return None

    def set_log_folder(self, folder: Path | str | None) -> None:
        self._data.setdefault("diagnostics", {})["log_folder"] = str(folder) if folder else ""


def configure_from_settings(settings: SettingsManager) -> Optional[Path]:
    """Apply the language and logging sections; returns the log file path, if any."""

    i18n.set_language(settings.get_language())
    return configure_logging(settings.get_log_level(), log_folder=settings.get_log_folder())

"""Parser configuration package.

Settings are stored as YAML and merged onto :data:`DEFAULT_CONFIG`.
"""

from __future__ import annotations

from .defaults import DEFAULT_CONFIG
from .settings import SettingsManager, configure_from_settings

__all__ = [
    "DEFAULT_CONFIG",
    "SettingsManager",
    "configure_from_settings",
]

"""gettext-based translation of user-facing parser messages."""

from __future__ import annotations

import gettext as _gettext
from pathlib import Path


_DOMAIN = "m3uscan"


def _default_locale_dir() -> Path:
    """Return directory containing compiled catalogs shipped with the package."""

    return Path(__file__).resolve().parent / "locale"


class _I18n:
    def __init__(self) -> None:
        self._translation: _gettext.NullTranslations = _gettext.NullTranslations()
        self._language: str | None = None

    @property
    def language(self) -> str | None:
        return self._language

    def set_language(self, language: str | None) -> None:
        languages = None
        if language:
            languages = [language]
        self._translation = _gettext.translation(
            _DOMAIN,
            localedir=_default_locale_dir(),
            languages=languages,
            fallback=True,
        )
        self._language = language or None

    def gettext(self, message: str) -> str:
        return self._translation.gettext(message)


_I18N = _I18n()


def set_language(language: str | None) -> None:
    """Configure the language used for error messages."""

    _I18N.set_language(language)


def get_language() -> str | None:
    return _I18N.language


def gettext(message: str) -> str:
    """Return translated message for current language."""

    return _I18N.gettext(message)


__all__ = ["get_language", "set_language", "gettext"]

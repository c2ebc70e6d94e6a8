"""Language reference data shared by the proxy and the client controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """Selectable translation language."""

    code: str
    name: str
    flag: str


LANGUAGES: Final[tuple[LanguageEntry, ...]] = (
    LanguageEntry("en", "English", "🇬🇧"),
    LanguageEntry("es", "Spanish", "🇪🇸"),
    LanguageEntry("fr", "French", "🇫🇷"),
    LanguageEntry("de", "German", "🇩🇪"),
    LanguageEntry("it", "Italian", "🇮🇹"),
    LanguageEntry("pt", "Portuguese", "🇵🇹"),
    LanguageEntry("ru", "Russian", "🇷🇺"),
    LanguageEntry("zh", "Chinese", "🇨🇳"),
    LanguageEntry("ja", "Japanese", "🇯🇵"),
    LanguageEntry("ko", "Korean", "🇰🇷"),
    LanguageEntry("ar", "Arabic", "🇸🇦"),
    LanguageEntry("hi", "Hindi", "🇮🇳"),
    LanguageEntry("tr", "Turkish", "🇹🇷"),
    LanguageEntry("nl", "Dutch", "🇳🇱"),
    LanguageEntry("pl", "Polish", "🇵🇱"),
    LanguageEntry("sv", "Swedish", "🇸🇪"),
    LanguageEntry("da", "Danish", "🇩🇰"),
    LanguageEntry("fi", "Finnish", "🇫🇮"),
    LanguageEntry("no", "Norwegian", "🇳🇴"),
    LanguageEntry("cs", "Czech", "🇨🇿"),
)

DEFAULT_SOURCE_LANG: Final[str] = "en"
DEFAULT_TARGET_LANG: Final[str] = "es"
MAX_TEXT_LENGTH: Final[int] = 5000

_BY_CODE: Final[dict[str, LanguageEntry]] = {entry.code: entry for entry in LANGUAGES}


def find_language(code: str | None) -> LanguageEntry | None:
    if not code:
        return None
    return _BY_CODE.get(code)


def display_name(code: str) -> str:
    """Return the English name for ``code``; unknown codes are returned as-is."""
    entry = find_language(code)
    return entry.name if entry else code

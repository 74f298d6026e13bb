"""
UI strings for EventHub.

t(key, **kwargs) looks the key up in the requested language, then in English,
and finally returns the key itself so a missing string shows up on the page.
"""

from typing import Dict
from locales.en import EN_STRINGS

DEFAULT_LANG = "en"

_STRINGS: Dict[str, Dict[str, str]] = {DEFAULT_LANG: EN_STRINGS}


def t(key: str, lang: str = DEFAULT_LANG, **kwargs) -> str:
    """Translated UI string, formatted with kwargs when given."""
    text = _STRINGS.get(lang, {}).get(key) or EN_STRINGS.get(key, key)
    return text.format(**kwargs) if kwargs else text


def add_language(code: str, strings: Dict[str, str]) -> None:
    """Register strings for a language; keys it lacks fall back to English."""
    _STRINGS[code] = dict(strings)

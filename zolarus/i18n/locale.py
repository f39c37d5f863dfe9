"""Supported UI languages and language selection."""

from __future__ import annotations

SUPPORTED_LANGS: tuple[str, ...] = ("en", "pt", "es", "fr")
DEFAULT_LANG = "en"
COOKIE_NAME = "zola_lang"
COOKIE_MAX_AGE = 365 * 24 * 60 * 60


def normalize_lang(value: str | None) -> str:
    """Return a supported language code, falling back to English."""

    code = (value or "").strip().lower()
    return code if code in SUPPORTED_LANGS else DEFAULT_LANG


def resolve_lang(query_lang: str | None = None, cookie_lang: str | None = None) -> str:
    """Pick the language from the query parameter, then the cookie."""

    for candidate in (query_lang, cookie_lang):
        code = (candidate or "").strip().lower()
        if code in SUPPORTED_LANGS:
            return code
    return DEFAULT_LANG


def with_lang(path: str, lang: str) -> str:
    """Append ``lang=`` to a navigation target unless it already carries one."""

    _, has_query, query = path.partition("?")
    if any(part.split("=", 1)[0] == "lang" for part in query.split("&") if part):
        return path
    separator = "&" if has_query else "?"
    return f"{path}{separator}lang={normalize_lang(lang)}"

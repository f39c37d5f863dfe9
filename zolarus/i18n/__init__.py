"""Locale helpers and the localized string bundle."""

from .bundle import BUNDLE, ResourceBundle, chips, text
from .locale import (
    COOKIE_MAX_AGE,
    COOKIE_NAME,
    DEFAULT_LANG,
    SUPPORTED_LANGS,
    normalize_lang,
    resolve_lang,
    with_lang,
)

__all__ = [
    "BUNDLE",
    "COOKIE_MAX_AGE",
    "COOKIE_NAME",
    "DEFAULT_LANG",
    "SUPPORTED_LANGS",
    "ResourceBundle",
    "chips",
    "normalize_lang",
    "resolve_lang",
    "text",
    "with_lang",
]

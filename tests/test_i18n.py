"""Tests for the localized string bundle and language selection."""

from __future__ import annotations

import pytest

from zolarus.i18n import (
    BUNDLE,
    SUPPORTED_LANGS,
    ResourceBundle,
    chips,
    normalize_lang,
    resolve_lang,
    text,
    with_lang,
)


def test_bundle_is_complete() -> None:
    assert BUNDLE.missing_translations() == []


@pytest.mark.parametrize("lang", SUPPORTED_LANGS)
def test_every_key_resolves_to_non_empty_text(lang: str) -> None:
    for key in BUNDLE.keys():
        assert text(key, lang).strip(), key


@pytest.mark.parametrize("lang", ["de", "", None, "english", "EN-us"])
def test_unsupported_language_matches_english(lang: str | None) -> None:
    for key in BUNDLE.keys():
        assert text(key, lang) == text(key, "en")


def test_unknown_key_raises() -> None:
    with pytest.raises(KeyError):
        text("does.not.exist", "en")


def test_missing_entry_falls_back_to_english() -> None:
    bundle = ResourceBundle({"greeting": {"en": "Hello", "pt": " "}})

    assert bundle.text("greeting", "pt") == "Hello"
    assert bundle.missing_translations() == [
        ("greeting", "pt"),
        ("greeting", "es"),
        ("greeting", "fr"),
    ]


def test_named_greeting_is_formatted() -> None:
    assert text("chat.greeting_named", "fr", name="Léa").startswith("Salut Léa !")


def test_chips_follow_language() -> None:
    assert chips("pt")[0] == "como criar um lembrete?"
    assert len(chips("es")) == 6
    assert chips("xx") == chips("en")


def test_normalize_lang() -> None:
    assert normalize_lang("PT") == "pt"
    assert normalize_lang(" fr ") == "fr"
    assert normalize_lang("it") == "en"
    assert normalize_lang(None) == "en"


def test_resolve_lang_prefers_query_then_cookie() -> None:
    assert resolve_lang("pt", "fr") == "pt"
    assert resolve_lang(None, "fr") == "fr"
    assert resolve_lang("xx", "es") == "es"
    assert resolve_lang("xx", "yy") == "en"
    assert resolve_lang() == "en"


def test_with_lang_appends_parameter() -> None:
    assert with_lang("/reminders", "pt") == "/reminders?lang=pt"
    assert with_lang("/shop?for=mom", "es") == "/shop?for=mom&lang=es"
    assert with_lang("/shop?lang=fr", "es") == "/shop?lang=fr"
    assert with_lang("/profile", "de") == "/profile?lang=en"

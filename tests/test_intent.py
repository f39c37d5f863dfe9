"""Tests for the ordered intent rules behind the chat widget."""

from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from zolarus.i18n import SUPPORTED_LANGS, chips, text
from zolarus.nlp.intent import IntentContext, IntentExtractor, canonical_page
from zolarus.nlp.shopping import ShoppingParser
from zolarus.storage import MemoryStore, PreferenceStore, SoftPreferences, StorageError

PAGES = ["/", "/dashboard", "/reminders", "/profile", "/referrals", "/shop"]


@pytest.fixture
def preferences() -> PreferenceStore:
    return PreferenceStore(MemoryStore())


@pytest.fixture
def extractor(preferences: PreferenceStore) -> IntentExtractor:
    return IntentExtractor(preferences)


def test_rules_are_evaluated_in_documented_order(extractor: IntentExtractor) -> None:
    assert extractor.rule_names() == [
        "explain_profile",
        "explain_referrals",
        "shopping",
        "open_reminders",
        "open_referrals",
        "back_to_dashboard",
        "open_shop",
        "open_profile",
        "page_help",
        "fallback",
    ]


@pytest.mark.parametrize("path", PAGES)
def test_profile_explanation_on_any_page(extractor: IntentExtractor, path: str) -> None:
    result = extractor.answer_for("why complete my profile?", path)

    assert result.reply == text("explain.profile", "en")
    assert result.nav == "/profile"
    assert result.intent == "explain_profile"


@pytest.mark.parametrize("lang", SUPPORTED_LANGS)
def test_profile_explanation_in_every_language(extractor: IntentExtractor, lang: str) -> None:
    result = extractor.answer_for(text("chip.why_profile", lang), "/dashboard", lang)

    assert result.reply == text("explain.profile", lang)
    assert result.nav == "/profile"


def test_referral_explanation_beats_shopping_words(extractor: IntentExtractor) -> None:
    result = extractor.answer_for("why should I buy gifts through referrals?", "/shop")

    assert result.intent == "explain_referrals"
    assert result.nav == "/referrals"


@pytest.mark.parametrize("path", PAGES)
def test_open_reminders_from_any_page(extractor: IntentExtractor, path: str) -> None:
    result = extractor.answer_for("open reminders", path)

    assert result.nav == "/reminders"
    assert result.reply == text("reply.open_reminders", "en")


@pytest.mark.parametrize("lang", SUPPORTED_LANGS)
def test_chips_route_to_their_intents(extractor: IntentExtractor, lang: str) -> None:
    labels = chips(lang)
    expected = [
        "fallback",
        "explain_profile",
        "open_reminders",
        "open_shop",
        "open_referrals",
        "back_to_dashboard",
    ]

    intents = [extractor.answer_for(label, "/dashboard", lang).intent for label in labels]

    assert intents == expected


def test_shopping_query_builds_shop_link(extractor: IntentExtractor) -> None:
    result = extractor.answer_for("gift ideas under $50 for mom", "/dashboard", "es")

    assert result.intent == "shopping"
    assert result.nav == "/shop?for=mom&budget=0-50&keywords=ideas"
    assert result.reply == text("reply.shop_query", "es")


def test_shopping_remembers_soft_preferences(
    extractor: IntentExtractor,
    preferences: PreferenceStore,
) -> None:
    extractor.answer_for("gift ideas under $50 for mom", "/dashboard", user_id="u1")

    assert preferences.load("u1") == SoftPreferences(last_budget="0-50", last_keywords="ideas")


def test_shopping_without_user_stores_nothing() -> None:
    store = MemoryStore()
    extractor = IntentExtractor(PreferenceStore(store))

    extractor.answer_for("gift ideas under $50 for mom")

    assert len(store) == 0


def test_stored_preferences_do_not_change_the_reply(preferences: PreferenceStore) -> None:
    preferences.save("u1", SoftPreferences(last_budget="0-500", last_keywords="watches"))
    with_prefs = IntentExtractor(preferences)
    without_prefs = IntentExtractor()

    first = with_prefs.answer_for("gift for dad", "/shop", "fr", user_id="u1")
    second = without_prefs.answer_for("gift for dad", "/shop", "fr", user_id="u1")

    assert first == second


def test_answer_is_idempotent(extractor: IntentExtractor) -> None:
    first = extractor.answer_for("birthday gift for my sister $30-$60", "/shop", "pt", "u1")
    second = extractor.answer_for("birthday gift for my sister $30-$60", "/shop", "pt", "u1")

    assert first == second
    assert first.nav == "/shop?for=sister&occasion=birthday&budget=30-60"


def test_prefill_fills_missing_budget(preferences: PreferenceStore) -> None:
    preferences.save("u1", SoftPreferences(last_budget="0-80"))
    extractor = IntentExtractor(preferences, prefill_from_preferences=True)

    first = extractor.answer_for("gift for dad", user_id="u1")
    second = extractor.answer_for("gift for dad", user_id="u1")

    assert first.nav == "/shop?for=dad&budget=0-80"
    assert second == first


@pytest.mark.parametrize(
    ("path", "key"),
    [
        ("/reminders", "help.reminders"),
        ("/dashboard/reminders", "help.reminders"),
        ("/profile/", "help.profile"),
        ("/refs", "help.referrals"),
        ("/shop?for=mom", "help.shop"),
    ],
)
def test_page_help_refreshes_current_page(extractor: IntentExtractor, path: str, key: str) -> None:
    result = extractor.answer_for("how does this work?", path, "pt")

    assert result.reply == text(key, "pt")
    assert result.nav == canonical_page(path)
    assert result.refresh is True


@pytest.mark.parametrize("message", ["", "   ", "asdf", "how do I create a reminder?"])
def test_unmatched_input_reaches_fallback(extractor: IntentExtractor, message: str) -> None:
    result = extractor.answer_for(message, "/dashboard")

    assert result.intent == "fallback"
    assert result.nav is None
    assert result.reply == text("reply.fallback", "en")


def test_unknown_language_answers_in_english(extractor: IntentExtractor) -> None:
    assert extractor.answer_for("open reminders", "/", "de") == extractor.answer_for("open reminders", "/", "en")
    assert extractor.answer_for("open reminders", "/", None).reply == text("reply.open_reminders", "en")


def test_parser_errors_are_not_hidden_behind_fallback() -> None:
    class ExplodingParser(ShoppingParser):
        def parse(self, text: str):
            raise RuntimeError("boom")

    extractor = IntentExtractor(parser=ExplodingParser())

    with pytest.raises(RuntimeError, match="boom"):
        extractor.answer_for("gift for mom", "/dashboard")


@pytest.mark.parametrize("digits", [20, 400])
def test_huge_amount_is_still_a_shopping_query(extractor: IntentExtractor, digits: int) -> None:
    amount = "9" * digits

    result = extractor.answer_for(f"gift for mom under ${amount}", "/dashboard")

    assert result.intent == "shopping"
    assert result.nav == f"/shop?for=mom&budget=0-{amount}"


def test_shopping_handler_requires_a_parsed_query(extractor: IntentExtractor) -> None:
    shopping = next(rule for rule in extractor.rules if rule.name == "shopping")
    context = IntentContext(text="hello", lowered="hello", path="/", lang="en", user_id=None)

    with pytest.raises(ValueError):
        shopping.handler(context)


def test_storage_failure_does_not_break_shopping() -> None:
    class BrokenStore(MemoryStore):
        def set(self, key: str, value: str) -> None:
            raise StorageError("quota exceeded")

    extractor = IntentExtractor(PreferenceStore(BrokenStore()))

    result = extractor.answer_for("gift for mom under $20", user_id="u1")

    assert result.intent == "shopping"
    assert result.nav == "/shop?for=mom&budget=0-20"


def test_canonical_page() -> None:
    assert canonical_page(None) == "/"
    assert canonical_page("/") == "/"
    assert canonical_page("/Dashboard/Profile/") == "/profile"
    assert canonical_page("/shop#top") == "/shop"


def test_matched_intent_is_counted(extractor: IntentExtractor) -> None:
    before = REGISTRY.get_sample_value("chat_intents_total", {"intent": "open_profile"}) or 0.0

    extractor.answer_for("open profile", "/dashboard")

    after = REGISTRY.get_sample_value("chat_intents_total", {"intent": "open_profile"})
    assert after == before + 1

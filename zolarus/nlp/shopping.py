"""Extract shopping parameters from free-text chat input."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import urlencode

from zolarus.nlp.recipient import RecipientResolver

_AMOUNT = r"\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?"

_SHOPPING_VOCAB = re.compile(
    r"\b(?:gifts?|presents?|presentes?|buy(?:ing)?|shop(?:ping)?|find|purchase|"
    r"comprar|compra|regalos?|cadeaux?|acheter|loja|tienda|boutique)\b",
    re.IGNORECASE,
)
_DOLLAR = re.compile(rf"\$\s*(?:{_AMOUNT})")
_BETWEEN = re.compile(
    rf"\b(?:between|entre)\s+\$?\s*(?P<low>{_AMOUNT})\s+(?:and|to|e|y|et|a)\s+\$?\s*(?P<high>{_AMOUNT})",
    re.IGNORECASE,
)
_FROM = re.compile(
    rf"\b(?:from|de)\s+\$\s*(?P<low>{_AMOUNT})\s+(?:to|and|a|à|até|hasta)\s+\$?\s*(?P<high>{_AMOUNT})",
    re.IGNORECASE,
)
_RANGE = re.compile(rf"\$\s*(?P<low>{_AMOUNT})\s*(?:-|–|to)\s*\$?\s*(?P<high>{_AMOUNT})", re.IGNORECASE)
_UNDER = re.compile(
    rf"\b(?:under|below|less\s+than|up\s+to|até|menos\s+de|moins\s+de)\s+\$\s*(?P<high>{_AMOUNT})",
    re.IGNORECASE,
)
_OVER = re.compile(
    rf"\b(?:over|above|more\s+than|mais\s+de|más\s+de|plus\s+de)\s+\$\s*(?P<low>{_AMOUNT})",
    re.IGNORECASE,
)
_BARE = re.compile(rf"\$\s*(?P<high>{_AMOUNT})")

_OCCASIONS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("birthday", re.compile(r"\b(?:birthdays?|b-?day|cumpleaños|anivers[áa]rio|anniversaire)\b", re.IGNORECASE)),
    ("holiday", re.compile(r"\b(?:christmas|xmas|holidays?|natal|navidad|no[ëe]l)\b", re.IGNORECASE)),
    ("anniversary", re.compile(r"\b(?:anniversary|bodas)\b", re.IGNORECASE)),
    ("housewarming", re.compile(r"\b(?:house\s?warming|new\s+home|casa\s+nova|crémaillère)\b", re.IGNORECASE)),
)

_FILLER = frozenset(
    {
        # English
        "a", "an", "the", "for", "my", "our", "to", "of", "in", "on", "at", "with", "and", "or",
        "some", "any", "me", "i", "i'm", "im", "want", "need", "looking", "look", "get", "go",
        "open", "take", "show", "please", "something", "buy", "buying", "find", "purchase",
        "shop", "shopping", "store", "gift", "gifts", "present", "presents", "budget", "dollars",
        "bucks", "around", "about", "under", "over", "between", "than", "more", "less",
        # Portuguese / Spanish / French
        "um", "uma", "o", "os", "as", "de", "do", "da", "para", "com", "ir", "ao", "à", "abrir",
        "quero", "preciso", "presente", "presentes", "comprar", "compra", "loja", "un", "una",
        "el", "la", "los", "las", "del", "al", "con", "quiero", "necesito", "busco", "regalo",
        "regalos", "tienda", "pour", "le", "les", "des", "du", "une", "au", "aller", "ouvrir",
        "je", "veux", "cadeau", "cadeaux", "acheter", "boutique",
    }
)
_TOKEN = re.compile(r"[^\W_][\w'’-]*")


@dataclass(frozen=True, slots=True)
class ParsedShoppingQuery:
    """Structured shopping parameters pulled from a chat message."""

    recipient: str | None = None
    occasion: str | None = None
    budget: str | None = None
    keywords: str | None = None

    def is_empty(self) -> bool:
        return not any((self.recipient, self.occasion, self.budget, self.keywords))

    def to_params(self) -> dict[str, str]:
        """Return shop query parameters for the fields that are set."""

        pairs = (
            ("for", self.recipient),
            ("occasion", self.occasion),
            ("budget", self.budget),
            ("keywords", self.keywords),
        )
        return {name: value for name, value in pairs if value}

    def to_query_string(self) -> str:
        return urlencode(self.to_params())

    def shop_path(self) -> str:
        query = self.to_query_string()
        return f"/shop?{query}" if query else "/shop"


def _whole_dollars(raw: str) -> str:
    """Drop separators and cents; amounts stay digit strings of any length."""

    digits = raw.replace(",", "").split(".", 1)[0].lstrip("0")
    return digits or "0"


def _magnitude(amount: str) -> tuple[int, str]:
    return len(amount), amount


def _span_budget(low: str | None, high: str | None) -> str:
    if low is not None and high is not None:
        lo, hi = sorted((_whole_dollars(low), _whole_dollars(high)), key=_magnitude)
        return f"{lo}-{hi}"
    if high is not None:
        return f"0-{_whole_dollars(high)}"
    return f"{_whole_dollars(low or '0')}-"


# Tried in order; the first pattern that matches decides the budget.
_BUDGET_PATTERNS: tuple[re.Pattern[str], ...] = (_BETWEEN, _FROM, _RANGE, _UNDER, _OVER, _BARE)


def looks_like_shopping(text: str) -> bool:
    """Gift/purchase vocabulary, a dollar amount, or a between-range."""

    return bool(_SHOPPING_VOCAB.search(text) or _DOLLAR.search(text) or _BETWEEN.search(text))


def extract_budget(text: str) -> str | None:
    """Return ``"low-high"``, ``"0-n"`` or ``"n-"`` for the first matching pattern."""

    for pattern in _BUDGET_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        groups = match.groupdict()
        return _span_budget(groups.get("low"), groups.get("high"))
    return None


def strip_budget(text: str) -> str:
    """Remove every budget phrase from ``text``."""

    for pattern in _BUDGET_PATTERNS:
        text = pattern.sub(" ", text)
    return text


def extract_occasion(text: str) -> str | None:
    for occasion, pattern in _OCCASIONS:
        if pattern.search(text):
            return occasion
    return None


def strip_occasions(text: str) -> str:
    for _, pattern in _OCCASIONS:
        text = pattern.sub(" ", text)
    return text


def extract_keywords(text: str) -> str | None:
    """Return the words left over once budget, occasion and shopping words are gone.

    ``text`` is expected to have the recipient phrase removed already.
    """

    residue = strip_occasions(strip_budget(text.lower()))
    words = [word for word in _TOKEN.findall(residue) if word not in _FILLER]
    return " ".join(words) or None


class ShoppingParser:
    """Combines the extraction steps into a single parse."""

    def __init__(self, resolver: RecipientResolver | None = None) -> None:
        self._resolver = resolver or RecipientResolver()

    def parse(self, text: str) -> ParsedShoppingQuery | None:
        """Return the parsed query, or ``None`` when the text is not a shopping request."""

        if not text or not looks_like_shopping(text):
            return None

        lowered = text.lower()
        recipient_match = self._resolver.extract(lowered)
        remainder = lowered
        recipient: str | None = None
        if recipient_match is not None:
            recipient = recipient_match.recipient
            start, end = recipient_match.span
            remainder = f"{lowered[:start]} {lowered[end:]}"

        budget = extract_budget(lowered)
        keywords = extract_keywords(remainder)
        if not (recipient or budget or keywords):
            return None

        return ParsedShoppingQuery(
            recipient=recipient,
            occasion=extract_occasion(lowered),
            budget=budget,
            keywords=keywords,
        )


_default_parser = ShoppingParser()


def parse_shopping(text: str) -> ParsedShoppingQuery | None:
    """Parse ``text`` with the default recipient lexicon."""

    return _default_parser.parse(text)


def apply_defaults(
    query: ParsedShoppingQuery,
    last_budget: str | None,
    last_keywords: str | None,
) -> ParsedShoppingQuery:
    """Fill a missing budget or keywords from remembered soft preferences."""

    return replace(
        query,
        budget=query.budget or last_budget,
        keywords=query.keywords or last_keywords,
    )

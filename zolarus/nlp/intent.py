"""Intent extraction for the chat widget.

Rules are evaluated in a fixed priority order and the first one whose
predicate matches produces the reply:

1. explanations ("why complete my profile", "why referrals")
2. shopping queries, routed to ``/shop?...``
3. direct navigation keywords
4. help for the page the user is on
5. a generic fallback
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Pattern

from zolarus.i18n import normalize_lang, text as t
from zolarus.metrics.prometheus_exporter import chat_intents_total
from zolarus.nlp.shopping import ParsedShoppingQuery, ShoppingParser, apply_defaults
from zolarus.storage.preferences import PreferenceStore

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IntentReply:
    """Reply text plus an optional navigation target."""

    reply: str
    nav: str | None = None
    refresh: bool = False
    intent: str = "fallback"


@dataclass(slots=True)
class IntentContext:
    """Everything a rule may look at for one message."""

    text: str
    lowered: str
    path: str
    lang: str
    user_id: str | None = None
    shopping: ParsedShoppingQuery | None = field(default=None)


Predicate = Callable[[IntentContext], bool]
Handler = Callable[[IntentContext], IntentReply]


@dataclass(slots=True)
class IntentRule:
    """A named ``(predicate, handler)`` pair."""

    name: str
    predicate: Predicate
    handler: Handler

    def matches(self, context: IntentContext) -> bool:
        return self.predicate(context)


def _pattern(*alternatives: str) -> Pattern[str]:
    return re.compile("|".join(alternatives), re.IGNORECASE)


_WHY = r"(?:why|por\s*qu[eé]|pourquoi)"

EXPLAIN_PROFILE = _pattern(
    rf"{_WHY}\b.*\b(?:complete|fill|finish)\b.*\bprofile",
    rf"{_WHY}\b.*\b(?:completar|preencher)\b.*\bperfil",
    rf"{_WHY}\b.*\bcompl[eé]ter\b.*\bprofil",
    rf"{_WHY}\b.*\b(?:profile|perfil|profil)\b",
)
EXPLAIN_REFERRALS = _pattern(
    rf"{_WHY}\b.*\b(?:referrals?|refer|indica[cç](?:ão|ões|oes|ao)|indicar|referencias?|referidos?|parrainages?|parrainer)\b",
)
OPEN_REMINDERS = _pattern(
    r"\b(?:open|show|go\s+to|see)\b.*\breminders?\b",
    r"\b(?:abrir|ver|ir\s+para)\b.*\b(?:lembretes?|recordatorios?)\b",
    r"\b(?:ouvrir|voir|aller\s+aux?)\b.*\brappels?\b",
    r"^\s*(?:reminders?|lembretes?|recordatorios?|rappels?)\s*[.!?]*\s*$",
)
OPEN_REFERRALS = _pattern(
    r"\breferrals?\b",
    r"\bindica[cç](?:ão|ões|oes|ao)\b",
    r"\b(?:referencias?|referidos?)\b",
    r"\bparrainages?\b",
)
BACK_TO_DASHBOARD = _pattern(
    r"\bdashboard\b",
    r"\bpainel\b",
    r"\bpanel\b",
    r"\btableau\s+de\s+bord\b",
)
OPEN_SHOP = _pattern(
    r"\bshop\b",
    r"\bloja\b",
    r"\btienda\b",
    r"\bboutique\b",
)
OPEN_PROFILE = _pattern(
    r"\b(?:open|show|go\s+to|edit)\b.*\bprofile\b",
    r"\b(?:abrir|ver|editar|ir\s+para)\b.*\bperfil\b",
    r"\b(?:ouvrir|voir|modifier)\b.*\bprofil\b",
    r"^\s*(?:my\s+)?(?:profile|perfil|profil)\s*[.!?]*\s*$",
)

_PAGE_ALIASES = {
    "/reminders": "/reminders",
    "/dashboard/reminders": "/reminders",
    "/profile": "/profile",
    "/dashboard/profile": "/profile",
    "/referrals": "/referrals",
    "/refs": "/referrals",
    "/dashboard/referrals": "/referrals",
    "/shop": "/shop",
}
_PAGE_HELP = {
    "/reminders": "help.reminders",
    "/profile": "help.profile",
    "/referrals": "help.referrals",
    "/shop": "help.shop",
}


def canonical_page(path: str | None) -> str:
    """Strip the query string and trailing slash and map known aliases."""

    bare = (path or "/").split("?", 1)[0].split("#", 1)[0]
    if len(bare) > 1:
        bare = bare.rstrip("/")
    return _PAGE_ALIASES.get(bare.lower(), bare or "/")


def _navigate(name: str, pattern: Pattern[str], reply_key: str, nav: str) -> IntentRule:
    return IntentRule(
        name=name,
        predicate=lambda ctx: bool(pattern.search(ctx.lowered)),
        handler=lambda ctx: IntentReply(reply=t(reply_key, ctx.lang), nav=nav, intent=name),
    )


class IntentExtractor:
    """Turns a chat message into a localized reply and navigation target."""

    def __init__(
        self,
        preferences: PreferenceStore | None = None,
        parser: ShoppingParser | None = None,
        *,
        prefill_from_preferences: bool = False,
    ) -> None:
        self._preferences = preferences
        self._parser = parser or ShoppingParser()
        self._prefill = prefill_from_preferences
        self._rules = self._build_rules()

    def _build_rules(self) -> list[IntentRule]:
        return [
            IntentRule(
                name="explain_profile",
                predicate=lambda ctx: bool(EXPLAIN_PROFILE.search(ctx.lowered)),
                handler=lambda ctx: IntentReply(
                    reply=t("explain.profile", ctx.lang), nav="/profile", intent="explain_profile"
                ),
            ),
            IntentRule(
                name="explain_referrals",
                predicate=lambda ctx: bool(EXPLAIN_REFERRALS.search(ctx.lowered)),
                handler=lambda ctx: IntentReply(
                    reply=t("explain.referrals", ctx.lang), nav="/referrals", intent="explain_referrals"
                ),
            ),
            IntentRule(name="shopping", predicate=self._is_shopping, handler=self._handle_shopping),
            _navigate("open_reminders", OPEN_REMINDERS, "reply.open_reminders", "/reminders"),
            _navigate("open_referrals", OPEN_REFERRALS, "reply.open_referrals", "/referrals"),
            _navigate("back_to_dashboard", BACK_TO_DASHBOARD, "reply.back_dashboard", "/dashboard"),
            _navigate("open_shop", OPEN_SHOP, "reply.open_shop", "/shop"),
            _navigate("open_profile", OPEN_PROFILE, "reply.open_profile", "/profile"),
            IntentRule(
                name="page_help",
                predicate=lambda ctx: ctx.path in _PAGE_HELP,
                handler=lambda ctx: IntentReply(
                    reply=t(_PAGE_HELP[ctx.path], ctx.lang),
                    nav=ctx.path,
                    refresh=True,
                    intent="page_help",
                ),
            ),
            IntentRule(
                name="fallback",
                predicate=lambda ctx: True,
                handler=lambda ctx: IntentReply(reply=t("reply.fallback", ctx.lang), intent="fallback"),
            ),
        ]

    @property
    def rules(self) -> list[IntentRule]:
        return list(self._rules)

    def rule_names(self) -> list[str]:
        """Rule names in evaluation order."""

        return [rule.name for rule in self._rules]

    def answer_for(
        self,
        text: str,
        path: str | None = "/",
        lang: str | None = "en",
        user_id: str | None = None,
    ) -> IntentReply:
        """Return the reply of the first matching rule."""

        raw = text or ""
        context = IntentContext(
            text=raw,
            lowered=raw.lower().strip(),
            path=canonical_page(path),
            lang=normalize_lang(lang),
            user_id=user_id,
        )
        for rule in self._rules:
            if not rule.matches(context):
                continue
            reply = rule.handler(context)
            logger.debug("Message matched intent %s", rule.name)
            chat_intents_total.labels(intent=rule.name).inc()
            return reply

        return IntentReply(reply=t("reply.fallback", context.lang), intent="fallback")

    def parse_shopping(self, text: str) -> ParsedShoppingQuery | None:
        return self._parser.parse(text)

    def _is_shopping(self, context: IntentContext) -> bool:
        context.shopping = self._parser.parse(context.text)
        return context.shopping is not None

    def _handle_shopping(self, context: IntentContext) -> IntentReply:
        query = context.shopping
        if query is None:
            raise ValueError("shopping rule handled a message that did not parse")
        if self._preferences is not None and context.user_id:
            if self._prefill:
                prefs = self._preferences.load(context.user_id)
                query = apply_defaults(query, prefs.last_budget, prefs.last_keywords)
            self._preferences.remember(context.user_id, query)
        return IntentReply(
            reply=t("reply.shop_query", context.lang),
            nav=query.shop_path(),
            intent="shopping",
        )

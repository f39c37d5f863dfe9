"""Chat widget session: transcript, chips and replies."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, replace
from typing import Literal

from zolarus.backend import BackendClient
from zolarus.i18n import chips as localized_chips, normalize_lang, text as t, with_lang
from zolarus.metrics.prometheus_exporter import chat_messages_total
from zolarus.nlp.intent import IntentExtractor, IntentReply

logger = logging.getLogger(__name__)

HIDDEN_PATHS = frozenset({"/", "/sign-in"})

Role = Literal["user", "bot"]


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One line of the chat transcript."""

    role: Role
    text: str


def widget_visible(path: str | None) -> bool:
    """The widget is not shown on the landing and sign-in pages."""

    bare = (path or "/").split("?", 1)[0]
    return bare not in HIDDEN_PATHS


class ChatSession:
    """Append-only transcript bound to one open widget."""

    def __init__(
        self,
        extractor: IntentExtractor,
        *,
        lang: str | None = "en",
        path: str = "/dashboard",
        user_id: str | None = None,
        name: str | None = None,
    ) -> None:
        self._extractor = extractor
        self.lang = normalize_lang(lang)
        self.path = path
        self.user_id = user_id
        self._name = name
        self._messages: list[ChatMessage] = []
        self.reset()

    def greeting(self) -> str:
        if self._name:
            return t("chat.greeting_named", self.lang, name=self._name)
        return t("chat.greeting", self.lang)

    def chips(self) -> list[str]:
        return localized_chips(self.lang)

    def transcript(self) -> list[ChatMessage]:
        return list(self._messages)

    def reset(self) -> None:
        """Start over with only the greeting."""

        self._messages = [ChatMessage(role="bot", text=self.greeting())]

    def navigate(self, path: str) -> None:
        self.path = path

    def send(self, text: str) -> IntentReply | None:
        """Answer ``text``; blank input is ignored and returns ``None``."""

        message = (text or "").strip()
        if not message:
            return None

        self._messages.append(ChatMessage(role="user", text=message))
        result = self._extractor.answer_for(message, self.path, self.lang, self.user_id)
        self._messages.append(ChatMessage(role="bot", text=result.reply))
        chat_messages_total.inc()

        if result.nav:
            result = replace(result, nav=with_lang(result.nav, self.lang))
        return result

    async def save(self, backend: BackendClient) -> bool:
        """Store the transcript in the backend memory table."""

        if not self.user_id:
            return False
        outcome = await backend.save_memory(
            self.user_id,
            [asdict(message) for message in self._messages],
        )
        return outcome.ok

    async def restore(self, backend: BackendClient) -> bool:
        """Replace the transcript with the saved one, if the backend has it."""

        if not self.user_id:
            return False
        outcome = await backend.load_memory(self.user_id)
        saved = outcome.value_or([])
        if not saved:
            return False
        self._messages = [ChatMessage(role=item["role"], text=item["text"]) for item in saved]
        logger.info("Restored %d chat messages for user %s", len(saved), self.user_id)
        return True

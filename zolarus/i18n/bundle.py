"""Single keyed resource bundle with English fallback."""

from __future__ import annotations

from typing import Mapping

from .locale import DEFAULT_LANG, SUPPORTED_LANGS, normalize_lang
from .messages import CHIP_KEYS, MESSAGES


class ResourceBundle:
    """Maps ``key -> language -> string`` and resolves lookups."""

    def __init__(self, messages: Mapping[str, Mapping[str, str]]) -> None:
        self._messages = {key: dict(entries) for key, entries in messages.items()}

    def keys(self) -> list[str]:
        return list(self._messages)

    def __contains__(self, key: object) -> bool:
        return key in self._messages

    def text(self, key: str, lang: str | None = None, **params: str) -> str:
        """Return the string for ``key`` in ``lang``, using English when missing.

        Raises ``KeyError`` for keys the bundle does not define.
        """

        entries = self._messages[key]
        value = entries.get(normalize_lang(lang)) or entries[DEFAULT_LANG]
        return value.format(**params) if params else value

    def missing_translations(self) -> list[tuple[str, str]]:
        """Return ``(key, lang)`` pairs with an absent or blank entry."""

        missing: list[tuple[str, str]] = []
        for key, entries in self._messages.items():
            for lang in SUPPORTED_LANGS:
                if not (entries.get(lang) or "").strip():
                    missing.append((key, lang))
        return missing


BUNDLE = ResourceBundle(MESSAGES)


def text(key: str, lang: str | None = None, **params: str) -> str:
    """Shortcut for :meth:`ResourceBundle.text` on the default bundle."""

    return BUNDLE.text(key, lang, **params)


def chips(lang: str | None = None) -> list[str]:
    """Suggested questions shown under the chat transcript."""

    return [BUNDLE.text(key, lang) for key in CHIP_KEYS]

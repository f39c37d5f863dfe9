"""Soft shopping preferences remembered per user."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from zolarus.storage.kv import KeyValueStore, StorageError

if TYPE_CHECKING:
    from zolarus.nlp.shopping import ParsedShoppingQuery

logger = logging.getLogger(__name__)

KEY_PREFIX = "zola_soft_prefs:"


@dataclass(slots=True)
class SoftPreferences:
    """Last budget and keywords a user searched for. Used only to prefill."""

    last_budget: str | None = None
    last_keywords: str | None = None


class PreferenceStore:
    """Reads and writes :class:`SoftPreferences` through a key-value store.

    Storage failures are logged and treated as "not persisted".
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @staticmethod
    def key_for(user_id: str) -> str:
        return f"{KEY_PREFIX}{user_id}"

    def load(self, user_id: str) -> SoftPreferences:
        try:
            raw = self._store.get(self.key_for(user_id))
        except StorageError:
            logger.warning("Soft preferences unavailable for user %s", user_id, exc_info=True)
            return SoftPreferences()
        if not raw:
            return SoftPreferences()
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Discarding corrupt soft preferences for user %s", user_id)
            return SoftPreferences()
        if not isinstance(payload, dict):
            return SoftPreferences()
        return SoftPreferences(
            last_budget=payload.get("last_budget") or None,
            last_keywords=payload.get("last_keywords") or None,
        )

    def save(self, user_id: str, prefs: SoftPreferences) -> bool:
        """Persist ``prefs``; returns ``False`` when the store refused the write."""

        try:
            self._store.set(self.key_for(user_id), json.dumps(asdict(prefs)))
        except StorageError:
            logger.warning("Soft preferences not persisted for user %s", user_id, exc_info=True)
            return False
        return True

    def remember(self, user_id: str, query: "ParsedShoppingQuery") -> bool:
        """Overwrite the stored preferences with the latest successful parse."""

        return self.save(
            user_id,
            SoftPreferences(last_budget=query.budget, last_keywords=query.keywords),
        )

    def forget(self, user_id: str) -> None:
        try:
            self._store.remove(self.key_for(user_id))
        except StorageError:
            logger.warning("Soft preferences not removed for user %s", user_id, exc_info=True)

"""Guest search limiter and terms-acceptance flag."""

from __future__ import annotations

import logging

from zolarus.storage.kv import KeyValueStore, StorageError

logger = logging.getLogger(__name__)

GUEST_SEARCHES_KEY = "z_guest_searches"
DEFAULT_GUEST_LIMIT = 3
DEFAULT_TERMS_VERSION = "2025-10-29"


class GuestSearchCounter:
    """Counts shop searches made without an account."""

    def __init__(self, store: KeyValueStore, limit: int = DEFAULT_GUEST_LIMIT) -> None:
        self._store = store
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def count(self) -> int:
        try:
            raw = self._store.get(GUEST_SEARCHES_KEY)
        except StorageError:
            return 0
        try:
            return max(0, int(raw or 0))
        except ValueError:
            return 0

    def limit_reached(self) -> bool:
        return self.count() >= self._limit

    def register(self) -> bool:
        """Record one search. Returns ``False`` once the limit is used up."""

        current = self.count()
        if current >= self._limit:
            return False
        try:
            self._store.set(GUEST_SEARCHES_KEY, str(current + 1))
        except StorageError:
            logger.warning("Guest search count not persisted", exc_info=True)
        return True

    def reset(self) -> None:
        try:
            self._store.remove(GUEST_SEARCHES_KEY)
        except StorageError:
            logger.warning("Guest search count not cleared", exc_info=True)


class TermsAcceptance:
    """Remembers that the disclaimer for a given terms version was accepted."""

    def __init__(self, store: KeyValueStore | None, version: str = DEFAULT_TERMS_VERSION) -> None:
        self._store = store
        self._version = version

    @property
    def key(self) -> str:
        return f"zola_terms_accepted_v{self._version}"

    def needs_acceptance(self) -> bool:
        """True when not yet accepted, or when acceptance cannot be read."""

        if self._store is None:
            return True
        try:
            return self._store.get(self.key) != "true"
        except StorageError:
            return True

    def accept(self) -> None:
        if self._store is None:
            return
        try:
            self._store.set(self.key, "true")
        except StorageError:
            logger.warning("Terms acceptance not persisted", exc_info=True)

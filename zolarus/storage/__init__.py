"""Key-value storage and the small records kept in it."""

from .kv import JsonFileStore, KeyValueStore, MemoryStore, StorageError
from .guest import GuestSearchCounter, TermsAcceptance
from .preferences import PreferenceStore, SoftPreferences

__all__ = [
    "GuestSearchCounter",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PreferenceStore",
    "SoftPreferences",
    "StorageError",
    "TermsAcceptance",
]

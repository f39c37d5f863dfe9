"""Key-value stores standing in for browser local/session storage."""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Dict, Protocol


class StorageError(RuntimeError):
    """Raised when the backing store cannot be read or written."""


class KeyValueStore(Protocol):
    """Minimal capability used by preferences, counters and flags."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store, the session-storage equivalent."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


class JsonFileStore:
    """Persists all keys in a single JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read storage file {self._path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise StorageError(f"Storage file {self._path} does not hold a JSON object.")
        return {str(key): str(value) for key, value in payload.items()}

    def _write(self, data: Dict[str, str]) -> None:
        body = json.dumps(data, ensure_ascii=False, indent=2)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(body, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise StorageError(f"Cannot write storage file {self._path}: {exc}") from exc

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = str(value)
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)

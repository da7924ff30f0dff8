"""Key-value storage contract and the in-memory backend."""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Protocol


class StorageError(Exception):
    """Raised when a backend holds data it cannot decode."""


class SchemaVersionError(StorageError):
    """Raised when the stored schema is newer than this code understands."""


class Storage(Protocol):
    """Minimal local-storage contract shared by every backend."""

    def get_item(self, key: str) -> Any | None: ...

    def set_item(self, key: str, value: Any) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def keys(self) -> Iterable[str]: ...


class MemoryStorage:
    """Storage kept in a dict of serialized JSON strings.

    Values go through json on the way in and out, so callers always get a
    fresh copy, the same as with the file and SQL backends.
    """

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Any | None:
        raw = self._items.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set_item(self, key: str, value: Any) -> None:
        self._items[key] = json.dumps(value, ensure_ascii=False)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)

"""Session helpers: the user logged in on this device."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from anymais.domain.records import public_user
from anymais.repositories.base import Storage

DEFAULT_SESSION_KEY = "anymais_session_v1"


class SessionHolder:
    """Keeps one public user record under its own storage key."""

    def __init__(self, storage: Storage, key: str = DEFAULT_SESSION_KEY) -> None:
        self.storage = storage
        self.key = key

    def get(self) -> Optional[dict]:
        # sessions written by older versions may still hold the password
        return public_user(self.storage.get_item(self.key))

    def set(self, user: Mapping[str, Any]) -> dict:
        record = public_user(user)
        self.storage.set_item(self.key, record)
        return record

    def clear(self) -> None:
        self.storage.remove_item(self.key)

"""
Authentication and account related use cases.

Failures are reported as ``None`` (or ``False``) rather than exceptions: a
bad login never says whether the e-mail or the password was wrong.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from anymais.core.security import hash_password, verify_password
from anymais.domain.plans import normalize_plan
from anymais.domain.records import public_user
from anymais.repositories.local_repository import UserRepository
from anymais.services.session_service import SessionHolder

logger = logging.getLogger(__name__)


class AuthService:
    """Handles login, signup, logout and edits of the logged-in account."""

    def __init__(self, users: UserRepository, sessions: SessionHolder) -> None:
        self.users = users
        self.sessions = sessions

    # -------------------------------------- sessao --------------------------------------
    def login(self, email: str, password: str) -> Optional[dict]:
        raw_email = (email or "").strip()
        user = self.users.find_by_email(raw_email) if raw_email else None
        if not user or not verify_password(password, user.get("password")):
            logger.info("Falha de login")
            return None
        return self.sessions.set(user)

    def signup(self, draft: Mapping[str, Any]) -> Optional[dict]:
        raw_email = (draft.get("email") or "").strip()
        password = draft.get("password") or ""
        if not raw_email or not password:
            raise ValueError("Email e senha sao obrigatorios")
        if self.users.find_by_email(raw_email):
            return None
        record = dict(draft)
        record.pop("id", None)
        record["email"] = raw_email
        record["password"] = hash_password(password)
        user = self.users.add(record)
        logger.info("Novo usuario %s criado (plano %s)", user["id"], user["plan"])
        return self.sessions.set(user)

    def logout(self) -> None:
        self.sessions.clear()

    def get_session(self) -> Optional[dict]:
        return self.sessions.get()

    # -------------------------------------- perfil --------------------------------------
    def update_user(self, updated: Mapping[str, Any]) -> bool:
        """Replace a user record, always keeping the stored password."""
        user_id = updated.get("id")
        existing = self.users.get(user_id) if user_id else None
        if not existing:
            return False
        record = dict(updated)
        record["password"] = existing.get("password")
        record["plan"] = normalize_plan(record.get("plan"))
        if record.get("favorites") is None:
            record["favorites"] = []
        self.users.replace(record)
        session = self.sessions.get()
        if session and session.get("id") == user_id:
            self.sessions.set(record)
        return True

    def toggle_favorite(self, pet_id: str) -> Optional[dict]:
        """Add or remove ``pet_id`` from the logged-in user's favorites."""
        current = self.sessions.get()
        if not current:
            return None
        favorites = list(current.get("favorites") or [])
        if pet_id in favorites:
            favorites.remove(pet_id)
        else:
            favorites.append(pet_id)
        current["favorites"] = favorites
        if not self.update_user(current):
            return None
        return self.sessions.get()

    def change_plan(self, plan: str) -> Optional[dict]:
        current = self.sessions.get()
        if not current:
            return None
        current["plan"] = normalize_plan(plan)
        if not self.update_user(current):
            return None
        return self.sessions.get()

    def current_user(self) -> Optional[dict]:
        """Fresh public copy of the logged-in user from the store."""
        session = self.sessions.get()
        if not session:
            return None
        return public_user(self.users.get(session.get("id")))

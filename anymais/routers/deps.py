"""Helpers shared by the routers (database handle, logged-in user)."""
from __future__ import annotations

from fastapi import HTTPException, Request

from anymais.database import Database


def get_database(request: Request) -> Database:
    database = getattr(getattr(request.app, "state", None), "database", None)
    if not database:
        raise RuntimeError("Database nao configurado")
    return database


def require_user(database: Database) -> dict:
    """Fresh copy of the logged-in user, or 401."""
    user = database.auth.current_user()
    if not user:
        raise HTTPException(401, "Faca login para continuar.")
    return user

"""Shapes and defaults for the records kept in the store."""
from __future__ import annotations

from typing import Any, Mapping

PET_TYPES = ("dog", "cat", "bird", "other")
DEFAULT_APPOINTMENT_STATUS = "scheduled"
DEFAULT_INTEREST_STATUS = "pending"

TABLES = ("users", "pets", "ongs", "appointments", "adoptionInterests")


def public_user(user: Mapping[str, Any] | None) -> dict | None:
    """Copy of a user record without the password field."""
    if user is None:
        return None
    return {key: value for key, value in user.items() if key != "password"}


def check_pet_type(value: str | None) -> str:
    pet_type = (value or "other").strip().lower()
    if pet_type not in PET_TYPES:
        raise ValueError(f"Tipo de pet invalido: {value!r}")
    return pet_type

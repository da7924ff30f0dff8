"""
Schema upgrades for the persisted store.

The blob carries a ``version`` tag; a blob without one is version 0. Each step
upgrades one version and the steps always run in order.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict

from anymais.core.security import hash_password, is_password_hash
from anymais.domain.plans import DEFAULT_PLAN
from anymais.domain.records import DEFAULT_APPOINTMENT_STATUS, DEFAULT_INTEREST_STATUS, TABLES
from anymais.repositories.base import SchemaVersionError, StorageError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 3


def _add_missing_tables(schema: dict) -> None:
    for table in TABLES:
        schema.setdefault(table, [])


def _fill_record_defaults(schema: dict) -> None:
    for user in schema["users"]:
        if not user.get("plan"):
            user["plan"] = DEFAULT_PLAN
        if user.get("favorites") is None:
            user["favorites"] = []
    for pet in schema["pets"]:
        if pet.get("vaccines") is None:
            pet["vaccines"] = []
        pet.setdefault("availableForDating", False)
    for appointment in schema["appointments"]:
        appointment.setdefault("status", DEFAULT_APPOINTMENT_STATUS)
    for interest in schema["adoptionInterests"]:
        interest.setdefault("status", DEFAULT_INTEREST_STATUS)


def _hash_plaintext_passwords(schema: dict) -> None:
    for user in schema["users"]:
        password = user.get("password")
        if password and not is_password_hash(password):
            user["password"] = hash_password(password)


UPGRADE_STEPS: Dict[int, Callable[[dict], None]] = {
    0: _add_missing_tables,
    1: _fill_record_defaults,
    2: _hash_plaintext_passwords,
}


def schema_version(schema: dict) -> int:
    try:
        return int(schema.get("version") or 0)
    except (TypeError, ValueError) as exc:
        raise StorageError(f"Versao de schema invalida: {schema.get('version')!r}") from exc


def upgrade_schema(schema: dict) -> bool:
    """Upgrade ``schema`` in place. Returns True when anything ran."""
    if not isinstance(schema, dict):
        raise StorageError("Schema armazenado nao e um objeto JSON")
    current = schema_version(schema)
    if current > SCHEMA_VERSION:
        raise SchemaVersionError(
            f"Schema versao {current} e mais novo que o suportado ({SCHEMA_VERSION})"
        )
    if current == SCHEMA_VERSION:
        return False
    while current < SCHEMA_VERSION:
        UPGRADE_STEPS[current](schema)
        current += 1
    schema["version"] = current
    logger.info("Schema atualizado para a versao %s", current)
    return True

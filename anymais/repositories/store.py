"""
Whole-schema persistence on top of a key-value Storage.

Every operation is read whole store, modify in memory, write whole store
back. There is no locking: one store instance per storage, single writer.
"""
from __future__ import annotations

import logging
from typing import Callable

from anymais.repositories.base import Storage
from anymais.repositories.migrations import SCHEMA_VERSION, upgrade_schema
from anymais.repositories.seed import build_seed_schema, empty_schema

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "anymais_db_v1"


class PersistentStore:
    """Loads and saves the ``{version, users, pets, ...}`` blob."""

    def __init__(
        self,
        storage: Storage,
        key: str = DEFAULT_STORE_KEY,
        *,
        seed: bool = True,
        seed_factory: Callable[[], dict] = build_seed_schema,
    ) -> None:
        self.storage = storage
        self.key = key
        self.seed = seed
        self.seed_factory = seed_factory

    def load(self) -> dict:
        """Return the current schema, seeding or upgrading it first if needed."""
        schema = self.storage.get_item(self.key)
        if schema is None:
            schema = self.seed_factory() if self.seed else empty_schema()
            logger.info("Store vazio em %r; inicializando (seed=%s)", self.key, self.seed)
            self.save(schema)
            return schema
        if upgrade_schema(schema):
            self.storage.set_item(self.key, schema)
        return schema

    def save(self, schema: dict) -> None:
        """Overwrite the whole persisted blob."""
        schema["version"] = SCHEMA_VERSION
        self.storage.set_item(self.key, schema)

    def reset(self) -> None:
        """Drop the blob; the next load() starts over."""
        self.storage.remove_item(self.key)

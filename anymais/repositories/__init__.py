"""
Persistence adapters.

Storage backends (memory, JSON file, SQL) hold opaque JSON values by key, the
PersistentStore keeps the whole entity schema under one key, and the entity
repositories are the only code that reads or writes that schema.
"""

from anymais.repositories.base import MemoryStorage, SchemaVersionError, Storage, StorageError
from anymais.repositories.json_storage import JsonFileStorage
from anymais.repositories.store import PersistentStore

__all__ = [
    "JsonFileStorage",
    "MemoryStorage",
    "PersistentStore",
    "SchemaVersionError",
    "Storage",
    "StorageError",
]

"""
Database handle: storage, store, session and repositories wired together.

Build one with ``open_database()`` at process start, pass it to whoever
needs it and call ``close()`` on shutdown.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from anymais.core.config import Settings, get_settings
from anymais.db.session import make_engine
from anymais.repositories.base import MemoryStorage, Storage
from anymais.repositories.json_storage import JsonFileStorage
from anymais.repositories.local_repository import (
    AdoptionInterestRepository,
    AppointmentRepository,
    OngRepository,
    PetRepository,
    UserRepository,
)
from anymais.repositories.sql_storage import SQLStorage
from anymais.repositories.store import DEFAULT_STORE_KEY, PersistentStore
from anymais.services.auth_service import AuthService
from anymais.services.session_service import DEFAULT_SESSION_KEY, SessionHolder

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> Storage:
    if settings.storage_backend == "memory":
        return MemoryStorage()
    if settings.storage_backend == "sql":
        return SQLStorage(make_engine(settings.database_url))
    return JsonFileStorage(settings.data_file)


@dataclass
class Database:
    """Every repository and the auth service over one storage."""

    storage: Storage
    store_key: str = DEFAULT_STORE_KEY
    session_key: str = DEFAULT_SESSION_KEY
    seed: bool = True
    store: PersistentStore = field(init=False)
    sessions: SessionHolder = field(init=False)
    users: UserRepository = field(init=False)
    pets: PetRepository = field(init=False)
    ongs: OngRepository = field(init=False)
    appointments: AppointmentRepository = field(init=False)
    adoption_interests: AdoptionInterestRepository = field(init=False)
    auth: AuthService = field(init=False)

    def __post_init__(self):
        self.store = PersistentStore(self.storage, self.store_key, seed=self.seed)
        self.sessions = SessionHolder(self.storage, self.session_key)
        self.users = UserRepository(self.store)
        self.pets = PetRepository(self.store)
        self.ongs = OngRepository(self.store)
        self.appointments = AppointmentRepository(self.store)
        self.adoption_interests = AdoptionInterestRepository(self.store)
        self.auth = AuthService(self.users, self.sessions)

    def close(self) -> None:
        dispose = getattr(self.storage, "dispose", None)
        if dispose:
            dispose()


def open_database(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> Database:
    """Build the handle and load the store once so seeding/upgrades happen now."""
    settings = settings or get_settings()
    storage = storage if storage is not None else build_storage(settings)
    database = Database(
        storage=storage,
        store_key=settings.store_key,
        session_key=settings.session_key,
        seed=settings.seed_on_first_load,
    )
    database.store.load()
    logger.info("Banco local aberto (%s)", type(storage).__name__)
    return database

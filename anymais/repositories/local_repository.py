"""Entity repositories over the PersistentStore."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from anymais.core.utils import new_id, utc_now_iso
from anymais.domain.plans import normalize_plan
from anymais.domain.records import (
    DEFAULT_APPOINTMENT_STATUS,
    DEFAULT_INTEREST_STATUS,
    check_pet_type,
)
from anymais.repositories.store import PersistentStore

logger = logging.getLogger(__name__)


def _index_of(rows: list[dict], record_id: str) -> int:
    for index, row in enumerate(rows):
        if row.get("id") == record_id:
            return index
    return -1


class _TableRepository:
    """Shared helpers for a single table of the schema."""

    table: str = ""
    id_prefix: str = ""

    def __init__(self, store: PersistentStore) -> None:
        self.store = store

    def _rows(self) -> list[dict]:
        return self.store.load()[self.table]

    def _filter(self, field: str, value: str) -> list[dict]:
        return [row for row in self._rows() if row.get(field) == value]

    def get(self, record_id: str) -> Optional[dict]:
        for row in self._rows():
            if row.get("id") == record_id:
                return row
        return None

    def _insert(self, record: dict) -> dict:
        data = self.store.load()
        record["id"] = new_id(self.id_prefix)
        data[self.table].append(record)
        self.store.save(data)
        return record

    def _replace(self, record: Mapping[str, Any]) -> bool:
        data = self.store.load()
        rows = data[self.table]
        index = _index_of(rows, record.get("id"))
        if index == -1:
            return False
        rows[index] = dict(record)
        self.store.save(data)
        return True

    def _set_status(self, record_id: str, status: str) -> bool:
        data = self.store.load()
        rows = data[self.table]
        index = _index_of(rows, record_id)
        if index == -1:
            return False
        rows[index]["status"] = status
        self.store.save(data)
        return True


class UserRepository(_TableRepository):
    table = "users"
    id_prefix = "u"

    def find_by_email(self, email: str) -> Optional[dict]:
        # exact, case-sensitive match
        for user in self._rows():
            if user.get("email") == email:
                return user
        return None

    def add(self, user: Mapping[str, Any]) -> dict:
        record = dict(user)
        record["plan"] = normalize_plan(record.get("plan"))
        record["favorites"] = list(record.get("favorites") or [])
        return self._insert(record)

    def replace(self, user: Mapping[str, Any]) -> bool:
        return self._replace(user)


class PetRepository(_TableRepository):
    table = "pets"
    id_prefix = "pet"

    def list_by_owner(self, owner_id: str) -> list[dict]:
        return self._filter("ownerId", owner_id)

    def list_available_for_dating(self, exclude_owner_id: str | None = None) -> list[dict]:
        return [
            pet
            for pet in self._rows()
            if pet.get("availableForDating") and (exclude_owner_id is None or pet.get("ownerId") != exclude_owner_id)
        ]

    @staticmethod
    def _normalize(pet: Mapping[str, Any]) -> dict:
        record = dict(pet)
        record["type"] = check_pet_type(record.get("type"))
        vaccines = []
        for vaccine in record.get("vaccines") or []:
            entry = dict(vaccine)
            if not entry.get("id"):
                entry["id"] = new_id("v")
            vaccines.append(entry)
        record["vaccines"] = vaccines
        record["availableForDating"] = bool(record.get("availableForDating", False))
        return record

    def create(self, pet: Mapping[str, Any]) -> dict:
        return self._insert(self._normalize(pet))

    def update(self, pet: Mapping[str, Any]) -> bool:
        return self._replace(self._normalize(pet))

    def delete(self, pet_id: str) -> bool:
        """Remove the pet and its appointments; adoption interests are kept."""
        data = self.store.load()
        before = len(data["pets"])
        data["pets"] = [p for p in data["pets"] if p.get("id") != pet_id]
        if len(data["pets"]) == before:
            return False
        data["appointments"] = [a for a in data["appointments"] if a.get("petId") != pet_id]
        self.store.save(data)
        logger.info("Pet %s removido junto com seus agendamentos", pet_id)
        return True

    def add_vaccine(self, pet_id: str, vaccine: Mapping[str, Any]) -> Optional[dict]:
        data = self.store.load()
        index = _index_of(data["pets"], pet_id)
        if index == -1:
            return None
        pet = data["pets"][index]
        entry = dict(vaccine)
        entry["id"] = new_id("v")
        pet.setdefault("vaccines", []).append(entry)
        self.store.save(data)
        return pet


class OngRepository(_TableRepository):
    table = "ongs"
    id_prefix = "ong"

    def list_all(self) -> list[dict]:
        return self._rows()

    def list_by_owner(self, owner_id: str) -> list[dict]:
        return self._filter("ownerId", owner_id)

    def search(self, query: str | None) -> list[dict]:
        term = (query or "").strip().lower()
        if not term:
            return self._rows()
        return [
            ong
            for ong in self._rows()
            if any(term in str(ong.get(field) or "").lower() for field in ("name", "location", "description"))
        ]

    def create(self, ong: Mapping[str, Any]) -> dict:
        return self._insert(dict(ong))

    def update(self, ong: Mapping[str, Any]) -> bool:
        return self._replace(ong)


class AppointmentRepository(_TableRepository):
    table = "appointments"
    id_prefix = "apt"

    def list_by_user(self, user_id: str) -> list[dict]:
        rows = self._filter("userId", user_id)
        return sorted(rows, key=lambda a: (a.get("date") or "", a.get("time") or ""))

    def list_by_pet(self, pet_id: str) -> list[dict]:
        rows = self._filter("petId", pet_id)
        return sorted(rows, key=lambda a: (a.get("date") or "", a.get("time") or ""))

    def create(self, appointment: Mapping[str, Any]) -> dict:
        record = dict(appointment)
        record["status"] = record.get("status") or DEFAULT_APPOINTMENT_STATUS
        return self._insert(record)

    def update_status(self, appointment_id: str, status: str) -> bool:
        return self._set_status(appointment_id, status)


class AdoptionInterestRepository(_TableRepository):
    table = "adoptionInterests"
    id_prefix = "int"

    def list_by_user(self, user_id: str) -> list[dict]:
        rows = self._filter("userId", user_id)
        return sorted(rows, key=lambda i: i.get("date") or "", reverse=True)

    def list_by_pet(self, pet_id: str) -> list[dict]:
        rows = self._filter("petId", pet_id)
        return sorted(rows, key=lambda i: i.get("date") or "", reverse=True)

    def create(self, interest: Mapping[str, Any]) -> dict:
        record = dict(interest)
        record["date"] = utc_now_iso()
        record["status"] = record.get("status") or DEFAULT_INTEREST_STATUS
        return self._insert(record)

    def update_status(self, interest_id: str, status: str) -> bool:
        return self._set_status(interest_id, status)

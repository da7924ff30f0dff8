"""
Smoke tests for the SQL storage backend against a temporary SQLite database.
"""
from __future__ import annotations

import pytest

from anymais.database import Database
from anymais.db.session import make_engine
from anymais.repositories.json_storage import JsonFileStorage
from anymais.repositories.migrations import SCHEMA_VERSION
from anymais.repositories.sql_storage import SQLStorage
from anymais.repositories.store import PersistentStore
from scripts.migrate_json_to_sql import migrate


@pytest.fixture()
def sql_storage(tmp_path):
    """SQLite temporário, descartado ao fim do teste para não bloquear o arquivo no Windows."""
    db_file = tmp_path / "test.db"
    storage = SQLStorage(make_engine(f"sqlite:///{db_file}"))
    yield storage
    storage.dispose()


def test_items_round_trip(sql_storage):
    sql_storage.set_item("k", {"a": [1, 2], "b": "ç"})
    assert sql_storage.get_item("k") == {"a": [1, 2], "b": "ç"}

    sql_storage.set_item("k", {"a": []})
    assert sql_storage.get_item("k") == {"a": []}
    assert sql_storage.keys() == ["k"]

    sql_storage.remove_item("k")
    assert sql_storage.get_item("k") is None
    assert sql_storage.keys() == []


def test_store_survives_new_engine(tmp_path):
    url = f"sqlite:///{tmp_path / 'store.db'}"
    first = SQLStorage(make_engine(url))
    database = Database(storage=first)
    database.store.load()
    database.pets.delete("pet-1")
    schema = database.store.load()
    first.dispose()

    second = SQLStorage(make_engine(url))
    try:
        assert PersistentStore(second).load() == schema
    finally:
        second.dispose()


def test_migrate_json_to_sql(tmp_path, sql_storage):
    source = JsonFileStorage(tmp_path / "data.json")
    source.set_item("anymais_db_v1", {"users": [{"id": "u9", "email": "x@y.com", "password": "pw"}], "pets": []})
    source.set_item("anymais_session_v1", {"id": "u9", "email": "x@y.com"})

    copied = migrate(source, sql_storage, store_key="anymais_db_v1", session_key="anymais_session_v1")

    assert copied == ["anymais_db_v1", "anymais_session_v1"]
    schema = sql_storage.get_item("anymais_db_v1")
    assert schema["version"] == SCHEMA_VERSION
    assert schema["appointments"] == []
    assert schema["users"][0]["password"].startswith("argon2$")
    assert sql_storage.get_item("anymais_session_v1") == {"id": "u9", "email": "x@y.com"}


def test_migrate_drops_password_from_legacy_session(tmp_path, sql_storage):
    source = JsonFileStorage(tmp_path / "data.json")
    source.set_item("anymais_session_v1", {"id": "u9", "email": "x@y.com", "password": "pw"})

    migrate(source, sql_storage, store_key="anymais_db_v1", session_key="anymais_session_v1")

    assert sql_storage.get_item("anymais_session_v1") == {"id": "u9", "email": "x@y.com"}


def test_migrate_skips_missing_keys(tmp_path, sql_storage):
    source = JsonFileStorage(tmp_path / "empty.json")
    assert migrate(source, sql_storage, store_key="anymais_db_v1", session_key="anymais_session_v1") == []

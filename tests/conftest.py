from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote anymais seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anymais.core import config as core_config  # noqa: E402
from anymais.database import Database  # noqa: E402
from anymais.repositories.base import MemoryStorage  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isola as settings de cada teste e aponta o arquivo JSON para tmp."""
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "data.json"))
    monkeypatch.delenv("STORAGE_BACKEND", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def db(storage):
    """Database com os dados de demonstracao (u1, pet-1, pet-2, apt-1)."""
    database = Database(storage=storage)
    database.store.load()
    return database


@pytest.fixture()
def empty_db(storage):
    database = Database(storage=storage, seed=False)
    database.store.load()
    return database

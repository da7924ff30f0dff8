"""
Configuration helpers for the AnyMais data layer.

Settings are read from environment variables once and cached, so repositories
and the HTTP app never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"
STORAGE_BACKENDS = {"json", "sql", "memory"}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: str
    database_url: str
    store_key: str
    session_key: str
    seed_on_first_load: bool
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    backend = (os.getenv("STORAGE_BACKEND") or "json").strip().lower()
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"STORAGE_BACKEND invalido: {backend!r}")

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=backend,
        data_file=os.getenv("DATA_FILE", str(DEFAULT_DATA_FILE)),
        database_url=os.getenv("DATABASE_URL", "").strip(),
        store_key=os.getenv("STORE_KEY", "anymais_db_v1"),
        session_key=os.getenv("SESSION_KEY", "anymais_session_v1"),
        seed_on_first_load=_bool(os.getenv("SEED_ON_FIRST_LOAD"), True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )

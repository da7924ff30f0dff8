"""One-off migration script: JSON file storage (data.json) -> SQL storage."""
from __future__ import annotations

import logging
from pathlib import Path
import sys

# Garantir que o pacote anymais seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anymais.core.config import get_settings
from anymais.core.logging_config import configure_logging
from anymais.db.session import make_engine
from anymais.domain.records import public_user
from anymais.repositories.base import Storage
from anymais.repositories.json_storage import JsonFileStorage
from anymais.repositories.migrations import upgrade_schema
from anymais.repositories.sql_storage import SQLStorage

logger = logging.getLogger("anymais.scripts.migrate_json_to_sql")


def migrate(source: Storage, target: Storage, *, store_key: str, session_key: str) -> list[str]:
    """Copy the store and session blobs; the store is upgraded on the way."""
    copied: list[str] = []
    schema = source.get_item(store_key)
    if schema is not None:
        upgrade_schema(schema)
        target.set_item(store_key, schema)
        copied.append(store_key)
    session = source.get_item(session_key)
    if session is not None:
        target.set_item(session_key, public_user(session))
        copied.append(session_key)
    return copied


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    data_file = Path(settings.data_file)
    if not data_file.exists():
        raise SystemExit(f"Arquivo nao encontrado: {data_file}")
    target = SQLStorage(make_engine(settings.database_url))
    try:
        copied = migrate(
            JsonFileStorage(data_file),
            target,
            store_key=settings.store_key,
            session_key=settings.session_key,
        )
    finally:
        target.dispose()
    logger.info("Chaves migradas: %s", ", ".join(copied) or "nenhuma")


if __name__ == "__main__":
    main()
    print("JSON data migrated to SQL storage successfully.")

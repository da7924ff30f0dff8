"""Storage backend keeping each key as a row of ``storage_items``."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine

from anymais.db.create_tables import create_all
from anymais.db.models import StorageItem
from anymais.db.session import get_session, make_sessionmaker


class SQLStorage:
    """Key-value helpers wrapping the SQLAlchemy session."""

    def __init__(self, engine: Engine, *, create_tables: bool = True) -> None:
        self.engine = engine
        self._sessionmaker = make_sessionmaker(engine)
        if create_tables:
            create_all(engine)

    def get_item(self, key: str) -> Any | None:
        with get_session(self._sessionmaker) as session:
            item = session.get(StorageItem, key)
            return item.value if item else None

    def set_item(self, key: str, value: Any) -> None:
        now = datetime.now(timezone.utc)
        with get_session(self._sessionmaker) as session:
            item = session.get(StorageItem, key)
            if not item:
                item = StorageItem(key=key, value=value, updated_at=now)
                session.add(item)
            else:
                item.value = value
                item.updated_at = now
            session.commit()

    def remove_item(self, key: str) -> None:
        with get_session(self._sessionmaker) as session:
            session.execute(delete(StorageItem).where(StorageItem.key == key))
            session.commit()

    def keys(self) -> list[str]:
        with get_session(self._sessionmaker) as session:
            return list(session.execute(select(StorageItem.key)).scalars().all())

    def dispose(self) -> None:
        self.engine.dispose()

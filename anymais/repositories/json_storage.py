"""
JSON file storage backend.

Every key lives in a single file that is rewritten whole on each write, via a
temporary file and an atomic rename.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from anymais.repositories.base import StorageError

logger = logging.getLogger(__name__)


class JsonFileStorage:
    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.error("Arquivo de dados corrompido: %s (%s)", self.path, exc)
            raise StorageError(f"Arquivo de dados corrompido: {self.path}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Formato inesperado em {self.path}")
        return data

    def _write_all(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def get_item(self, key: str) -> Any | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def keys(self) -> list[str]:
        return list(self._read_all())

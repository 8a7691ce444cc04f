from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from ..core.exceptions import PersistenceError
from .repository import KeyValueStore


class JsonFileKeyValueStore(KeyValueStore):
    """Key-value store kept in one JSON object on disk.

    Note: writes go through a temp file and os.replace.
    """

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Cannot read {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Unexpected content in {self._path}")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def put(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except PersistenceError:
            # Corrupt file: rewrite it from scratch.
            data = {}
        data[key] = value

        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self._path}: {e}") from e

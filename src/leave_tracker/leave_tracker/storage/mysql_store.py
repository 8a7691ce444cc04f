from __future__ import annotations

from typing import Optional

from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .repository import KeyValueStore


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(f"SELECT v FROM {KV_TABLE} WHERE k=%s", (key,))
            row = cur.fetchone()
        return row["v"] if row else None

    def put(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                INSERT INTO {KV_TABLE} (k, v) VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, value),
            )

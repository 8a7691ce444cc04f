from __future__ import annotations

import logging

from .connection import DatabaseConnection
from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

KV_TABLE = "kv_store"

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS {KV_TABLE} (
    k VARCHAR(191) NOT NULL PRIMARY KEY,
    v LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
"""


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create the key-value table (idempotent)."""
    with db_cursor(conn_factory, dictionary=False) as cur:
        cur.execute(SCHEMA_SQL)
    logger.info("Schema ready (table=%s, db=%s)", KV_TABLE, conn_factory.config.describe())

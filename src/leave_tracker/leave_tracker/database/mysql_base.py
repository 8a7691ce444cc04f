from __future__ import annotations

from contextlib import contextmanager

import mysql.connector

from ..core.exceptions import PersistenceError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield a cursor inside one transaction.

    Commits on success, rolls back otherwise. Driver errors surface as
    PersistenceError.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise PersistenceError(f"Cannot connect to {conn_factory.config.describe()}: {e}") from e

    cur = conn.cursor(dictionary=dictionary)
    try:
        yield cur
        conn.commit()
    except mysql.connector.Error as e:
        conn.rollback()
        raise PersistenceError(f"Query failed on {conn_factory.config.describe()}: {e}") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()

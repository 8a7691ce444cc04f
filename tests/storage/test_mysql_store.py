from __future__ import annotations

import mysql.connector
import pytest

from src.leave_tracker.leave_tracker.core.exceptions import PersistenceError
from src.leave_tracker.leave_tracker.database.connection import DBConfig
from src.leave_tracker.leave_tracker.database.mysql_base import db_cursor
from src.leave_tracker.leave_tracker.storage.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table, fail=False):
        self._table = table
        self._fail = fail
        self._row = None
        self.closed = False

    def execute(self, sql, params):
        if self._fail:
            raise mysql.connector.Error("table is gone")
        if sql.lstrip().startswith("SELECT"):
            v = self._table.get(params[0])
            self._row = {"v": v} if v is not None else None
        else:
            self._table[params[0]] = params[1]

    def fetchone(self):
        return self._row

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, table, fail=False):
        self.cursor_obj = FakeCursor(table, fail)
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self, fail=False):
        self.config = DBConfig.from_dict({"database": "leave_tracker_test"})
        self.table = {}
        self.fail = fail
        self.connections = []

    def connect(self):
        conn = FakeConnection(self.table, self.fail)
        self.connections.append(conn)
        return conn


def test_put_then_get_commits_and_closes():
    factory = FakeConnectionFactory()
    store = MySQLKeyValueStore(factory)

    store.put("personnelData", "[]")

    assert store.get("personnelData") == "[]"
    assert store.get("missing") is None
    assert all(c.committed and c.closed and c.cursor_obj.closed for c in factory.connections)


def test_driver_error_is_rolled_back_and_reported_as_persistence_error():
    factory = FakeConnectionFactory(fail=True)

    with pytest.raises(PersistenceError, match="leave_tracker_test"):
        MySQLKeyValueStore(factory).put("personnelData", "[]")

    conn = factory.connections[0]
    assert conn.rolled_back and not conn.committed and conn.closed


def test_other_errors_roll_back_and_propagate_unchanged():
    factory = FakeConnectionFactory()

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    assert factory.connections[0].rolled_back


def test_connect_failure_is_reported_as_persistence_error():
    class DownFactory(FakeConnectionFactory):
        def connect(self):
            raise mysql.connector.Error("Can't connect to MySQL server")

    with pytest.raises(PersistenceError, match="Cannot connect to root@localhost:3306/leave_tracker_test"):
        MySQLKeyValueStore(DownFactory()).get("personnelData")

from __future__ import annotations

from pathlib import Path

import pytest

from src.hr_portal.hr_portal.database.bootstrap import _iter_sql_statements, _strip_comments, _strip_create_db_and_use
from src.hr_portal.hr_portal.database.mysql_base import Database

SCHEMA = Path(__file__).resolve().parents[1] / "database" / "schema.sql"


class FakeCursor:
    def __init__(self, rows, lastrowid=None, rowcount=0, fail=False):
        self._rows = rows
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self._fail = fail
        self.executed = []
        self.closed = False

    def execute(self, query, params=()):
        if self._fail:
            raise RuntimeError("boom")
        self.executed.append((query, params))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, cursor):
        self.cursor = cursor
        self.connections = []

    def connect(self):
        conn = FakeConnection(self.cursor)
        self.connections.append(conn)
        return conn


def test_get_returns_first_row_or_none():
    factory = FakeConnFactory(FakeCursor([{"id": 1}]))
    assert Database(factory).get("SELECT * FROM employees WHERE id=%s", [1]) == {"id": 1}
    assert factory.cursor.executed == [("SELECT * FROM employees WHERE id=%s", (1,))]

    assert Database(FakeConnFactory(FakeCursor([]))).get("SELECT 1") is None


def test_all_returns_list_and_commits():
    factory = FakeConnFactory(FakeCursor([{"id": 1}, {"id": 2}]))

    assert Database(factory).all("SELECT id FROM employees") == [{"id": 1}, {"id": 2}]
    assert factory.connections[0].committed
    assert factory.connections[0].closed


def test_run_exposes_generated_id():
    factory = FakeConnFactory(FakeCursor([], lastrowid=7, rowcount=1))

    result = Database(factory).run("INSERT INTO timesheets(summary) VALUES(%s)", ("x",))

    assert result.last_id == 7
    assert result.rowcount == 1


def test_failed_statement_rolls_back_and_propagates():
    factory = FakeConnFactory(FakeCursor([], fail=True))

    with pytest.raises(RuntimeError):
        Database(factory).run("INSERT INTO employees VALUES()")

    conn = factory.connections[0]
    assert conn.rolled_back
    assert not conn.committed
    assert conn.closed


def test_schema_splits_into_table_statements():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8")))

    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 3
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_splitter_keeps_semicolons_inside_quotes():
    assert list(_iter_sql_statements("INSERT INTO t VALUES ('a;b'); SELECT 1")) == [
        "INSERT INTO t VALUES ('a;b')",
        "SELECT 1",
    ]

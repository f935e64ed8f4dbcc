from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


@dataclass(frozen=True)
class RunResult:
    last_id: Optional[int]
    rowcount: int


class Database:
    """Persistence accessor shared by every repository.

    Each call opens its own connection and commits on success, so a sequence
    of ``run`` calls is not atomic. Queries are always parameterized.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, query: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            return fetchone(cur)

    def all(self, query: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            return fetchall(cur)

    def run(self, query: str, params: Sequence[Any] = ()) -> RunResult:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(query, tuple(params))
            last_id = int(cur.lastrowid) if cur.lastrowid else None
            return RunResult(last_id=last_id, rowcount=int(cur.rowcount))

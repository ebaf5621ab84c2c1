"""A small SQLite-backed database and SQL statement holders."""

from __future__ import annotations

import contextlib
import os
import sqlite3
import threading
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Callable, Iterator, Sequence, TypeVar

T = TypeVar("T")

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(20) NOT NULL UNIQUE,
        password CHAR(32) NOT NULL,
        gender TINYINT NOT NULL DEFAULT 0,
        created_at DATETIME,
        updated_at DATETIME,
        deleted_at DATETIME
    )""",
    """CREATE TABLE IF NOT EXISTS logs (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(20) NOT NULL,
        created_at DATETIME NOT NULL
    )""",
)


def _adapt(args: Sequence[Any]) -> tuple:
    def convert(value: Any) -> Any:
        if isinstance(value, datetime):
            return value.isoformat(" ")
        if isinstance(value, date):
            return value.isoformat()
        return value

    return tuple(convert(value) for value in args)


class Database:
    """A thread-safe SQLite connection with nestable transactions."""

    def __init__(self, path: str | os.PathLike = ":memory:") -> None:
        self._conn = sqlite3.connect(
            str(path), check_same_thread=False, isolation_level=None
        )
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.RLock()

    def query(self, sql: str, args: Sequence[Any] = ()) -> list[dict[str, Any]]:
        """Run a query and return its rows as dictionaries."""
        with self._lock:
            rows = self._conn.execute(sql, _adapt(args)).fetchall()
        return [dict(row) for row in rows]

    def execute(self, sql: str, args: Sequence[Any] = ()) -> int:
        """Run a statement and return the number of rows it affected."""
        with self._lock:
            return self._conn.execute(sql, _adapt(args)).rowcount

    @contextlib.contextmanager
    def transaction(self) -> Iterator[Database]:
        """Run the enclosed statements atomically; roll back if an exception escapes."""
        with self._lock:
            if self._conn.in_transaction:
                yield self
                return
            self._conn.execute("BEGIN")
            try:
                yield self
            except BaseException:
                self._conn.rollback()
                raise
            self._conn.commit()

    def create_tables(self) -> None:
        """Create the users and logs tables if they do not exist."""
        with self._lock:
            for statement in _SCHEMA:
                self._conn.execute(statement)

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


@dataclass
class SqlMapper:
    """A SQL statement and its arguments."""

    sql: str
    args: list[Any] = field(default_factory=list)

    def query(self, database: Database) -> list[dict[str, Any]]:
        return database.query(self.sql, self.args)

    def exec(self, database: Database) -> int:
        return database.execute(self.sql, self.args)


class SqlMappers(list):
    """Statements that are run together in one transaction."""

    def exec(self, database: Database, func: Callable[[], T]) -> T:
        """Call ``func`` inside a transaction on ``database`` and return its result."""
        with database.transaction():
            return func()
from datetime import datetime

import pytest

from thinkbox.database import Database, SqlMapper, SqlMappers


@pytest.fixture
def db():
    with Database() as database:
        database.create_tables()
        yield database


def _log_names(db):
    return [row["name"] for row in db.query("SELECT name FROM logs ORDER BY id")]


def test_execute_and_query_round_trip(db):
    when = datetime(2024, 5, 6, 7, 8, 9)
    affected = db.execute(
        "INSERT INTO logs (name, created_at) VALUES (?, ?)", ["first", when]
    )
    assert affected == 1
    rows = db.query("SELECT name, created_at FROM logs")
    assert len(rows) == 1
    assert rows[0]["name"] == "first"
    assert datetime.fromisoformat(rows[0]["created_at"]) == when


def test_create_tables_is_idempotent(db):
    db.create_tables()
    assert db.query("SELECT COUNT(*) AS n FROM users") == [{"n": 0}]


def test_transaction_commits(db):
    with db.transaction():
        db.execute("INSERT INTO logs (name, created_at) VALUES (?, ?)", ["a", "t"])
    assert _log_names(db) == ["a"]


def test_transaction_rolls_back(db):
    with pytest.raises(RuntimeError):
        with db.transaction():
            db.execute("INSERT INTO logs (name, created_at) VALUES (?, ?)", ["a", "t"])
            raise RuntimeError("stop")
    assert _log_names(db) == []


def test_sql_mapper_exec_and_query(db):
    insert = SqlMapper("INSERT INTO logs (name, created_at) VALUES (?, ?)", ["m", "t"])
    assert insert.exec(db) == 1
    select = SqlMapper("SELECT name FROM logs WHERE name = ?", ["m"])
    assert select.query(db) == [{"name": "m"}]


def test_sql_mappers_commit_together(db):
    first = SqlMapper("INSERT INTO logs (name, created_at) VALUES (?, ?)", ["x", "t"])
    second = SqlMapper("INSERT INTO logs (name, created_at) VALUES (?, ?)", ["y", "t"])
    mappers = SqlMappers([first, second])
    outcome = mappers.exec(db, lambda: first.exec(db) + second.exec(db))
    assert outcome == 2
    assert _log_names(db) == ["x", "y"]


def test_sql_mappers_roll_back_together(db):
    first = SqlMapper("INSERT INTO logs (name, created_at) VALUES (?, ?)", ["x", "t"])
    broken = SqlMapper("INSERT INTO logs (name, created_at) VALUES (?, ?)", [None, "t"])

    def run():
        first.exec(db)
        broken.exec(db)

    with pytest.raises(Exception):
        SqlMappers([first, broken]).exec(db, run)
    assert _log_names(db) == []
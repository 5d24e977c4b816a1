from unittest import mock

import psycopg2
from psycopg2 import extras
import pytest

from db import connection
from db.connection import Database
from db.init_db import SCHEMA_SQL, create_tables
from tests.fakes import FakeDatabase


@pytest.fixture
def fake_pool(monkeypatch):
    conn = mock.MagicMock()
    conn.closed = 0
    cursor = conn.cursor.return_value.__enter__.return_value
    pool = mock.MagicMock()
    pool.getconn.return_value = conn
    factory = mock.MagicMock(return_value=pool)
    monkeypatch.setattr(connection.pool, "SimpleConnectionPool", factory)
    return factory, pool, conn, cursor


def test_pool_created_from_dsn(fake_pool):
    factory, *_ = fake_pool
    Database("postgresql://localhost/lunchly", 2, 7)
    factory.assert_called_once_with(2, 7, "postgresql://localhost/lunchly")


def test_pool_failure_is_reraised(monkeypatch):
    monkeypatch.setattr(
        connection.pool, "SimpleConnectionPool",
        mock.MagicMock(side_effect=psycopg2.OperationalError("refused")),
    )
    with pytest.raises(psycopg2.OperationalError):
        Database("postgresql://nowhere/lunchly")


def test_execute_returns_rows_and_commits(fake_pool):
    _, pool, conn, cursor = fake_pool
    cursor.description = [("id",)]
    cursor.fetchall.return_value = [{"id": 1}, {"id": 2}]

    rows = Database("dsn").execute("SELECT id FROM customers WHERE id > %s", [0])

    assert rows == [{"id": 1}, {"id": 2}]
    cursor.execute.assert_called_once_with("SELECT id FROM customers WHERE id > %s", (0,))
    conn.cursor.assert_called_once_with(cursor_factory=extras.RealDictCursor)
    conn.commit.assert_called_once()
    pool.putconn.assert_called_once_with(conn, close=False)


def test_execute_without_result_set(fake_pool):
    _, _, conn, cursor = fake_pool
    cursor.description = None

    assert Database("dsn").execute("UPDATE customers SET notes = %s", ("x",)) == []
    cursor.fetchall.assert_not_called()
    conn.commit.assert_called_once()


def test_execute_rolls_back_and_releases_on_error(fake_pool):
    _, pool, conn, cursor = fake_pool
    cursor.execute.side_effect = psycopg2.IntegrityError("duplicate key")

    with pytest.raises(psycopg2.IntegrityError):
        Database("dsn").execute("INSERT INTO customers DEFAULT VALUES")

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    pool.putconn.assert_called_once_with(conn, close=False)


def test_dropped_connection_keeps_original_error_and_is_discarded(fake_pool):
    _, pool, conn, cursor = fake_pool
    dropped = psycopg2.OperationalError("server closed the connection unexpectedly")

    def drop_connection(*args):
        conn.closed = 2
        raise dropped

    cursor.execute.side_effect = drop_connection
    conn.rollback.side_effect = psycopg2.InterfaceError("connection already closed")

    with pytest.raises(psycopg2.OperationalError) as exc:
        Database("dsn").execute("SELECT 1")

    assert exc.value is dropped
    conn.rollback.assert_not_called()
    pool.putconn.assert_called_once_with(conn, close=True)


def test_close_is_idempotent(fake_pool):
    _, pool, *_ = fake_pool
    db = Database("dsn")

    db.close()
    db.close()

    pool.closeall.assert_called_once()
    with pytest.raises(RuntimeError):
        db.execute("SELECT 1")


def test_from_config_uses_settings(fake_pool, monkeypatch):
    factory, *_ = fake_pool
    monkeypatch.setattr(connection, "DATABASE_URL", "postgresql://cfg/lunchly")
    monkeypatch.setattr(connection, "DB_POOL_MIN", 3)
    monkeypatch.setattr(connection, "DB_POOL_MAX", 9)

    Database.from_config()

    factory.assert_called_once_with(3, 9, "postgresql://cfg/lunchly")


def test_create_tables_runs_schema():
    db = FakeDatabase()
    create_tables(db)
    assert len(db.calls) == 1
    assert "CREATE TABLE IF NOT EXISTS customers" in db.calls[0][0]
    assert "CREATE TABLE IF NOT EXISTS reservations" in SCHEMA_SQL

"""
db/connection.py
----------------
Manages the PostgreSQL connection pool and runs parameterized statements.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

A `Database` is created once by the caller and handed to each repository;
repositories only rely on the `QueryExecutor` protocol, so tests can pass
in a substitute store.
"""

from typing import Any, Optional, Protocol, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

Row = dict[str, Any]


class QueryExecutor(Protocol):
    """Anything that can run a SQL template with positional parameters."""

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[Row]:
        ...


class Database:
    """
    Query-execution capability backed by a psycopg2 connection pool.

    Parameters are always bound positionally (``%s`` placeholders) by the
    driver; statements are never built by string interpolation.
    """

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 5):
        """
        Initialize the database connection pool.

        Args:
            dsn: PostgreSQL connection string.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        try:
            self._pool: Optional[pool.SimpleConnectionPool] = pool.SimpleConnectionPool(
                min_conn, max_conn, dsn
            )
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    @classmethod
    def from_config(cls) -> "Database":
        """Build a Database from the settings in config.py."""
        return cls(DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX)

    def _get_connection(self):
        if self._pool is None:
            raise RuntimeError("Database pool is closed.")
        return self._pool.getconn()

    def _release_connection(self, conn) -> None:
        # a connection the server dropped is discarded, not pooled again
        if self._pool is not None:
            self._pool.putconn(conn, close=bool(conn.closed))

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[Row]:
        """
        Run a single statement and commit it.

        Args:
            sql: SQL template using ``%s`` placeholders.
            params: Values bound to the placeholders, in order.

        Returns:
            Every returned row as a dict keyed by column name,
            or an empty list for statements without a result set.

        Raises:
            psycopg2.Error: Propagated unmodified after a rollback.
        """
        conn = self._get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(sql, tuple(params))
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            conn.commit()
            return rows
        except Exception as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Query failed: {e}")
            raise
        finally:
            self._release_connection(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

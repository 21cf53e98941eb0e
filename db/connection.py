"""
db/connection.py
----------------
Manages the PostgreSQL connection pool and the `Db` connection handle.

The pool hands out psycopg2 connections and keeps track of the ones still
borrowed, so it cannot be closed under a live `Db`. A `Db` runs in
autocommit mode between transactions; only `begin_transaction` ...
`commit`/`rollback` groups statements on the server.
"""

from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool
from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None
_borrowed: set[int] = set()


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: str = DATABASE_URL) -> None:
    """
    Open the connection pool; a second call is a no-op.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn)
        logger.info(f"Connection pool ready ({min_conn}..{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Could not open connection pool: {e}")
        raise


def get_connection():
    """
    Borrow a connection; it counts as in use until `release_connection`.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    conn = _pool.getconn()
    _borrowed.add(id(conn))
    return conn


def release_connection(conn) -> None:
    if _pool is None:
        return
    _borrowed.discard(id(conn))
    _pool.putconn(conn)


def borrowed_count() -> int:
    """Number of connections currently held by callers."""
    return len(_borrowed)


def close_pool(force: bool = False) -> None:
    """
    Close every pooled connection.

    Raises:
        RuntimeError: If connections are still borrowed and `force` is not set.
    """
    global _pool
    if _pool is None:
        return
    if _borrowed and not force:
        raise RuntimeError(f"Cannot close pool: {len(_borrowed)} connection(s) still in use.")
    _pool.closeall()
    _pool = None
    _borrowed.clear()
    logger.info("Connection pool closed.")


class Db:
    """
    Connection handle shared by a factory and every DAO it creates.

    Wraps one psycopg2 connection kept in autocommit mode, so statements
    outside a transaction take effect immediately. `begin_transaction`
    switches autocommit off; `commit` and `rollback` end the server
    transaction and switch it back on.
    """

    def __init__(self, conn, pooled: bool = False):
        self._conn = conn
        self._pooled = pooled
        self._transaction_active = False
        self._conn.autocommit = True

    @classmethod
    def from_pool(cls) -> "Db":
        """Borrow a connection from the pool; `close()` gives it back."""
        return cls(get_connection(), pooled=True)

    @property
    def connection(self):
        """The underlying psycopg2 connection."""
        return self._conn

    # ── TRANSACTIONS ──────────────────────────────────────

    def begin_transaction(self) -> None:
        """
        Open a transaction.

        Raises:
            RuntimeError: If a transaction is already open on this handle;
                psycopg2 has no nesting and savepoints are not emulated.
        """
        if self._transaction_active:
            raise RuntimeError("Transaction already active on this connection.")
        self._conn.autocommit = False
        self._transaction_active = True
        logger.debug("Transaction started.")

    def commit(self) -> None:
        try:
            self._conn.commit()
        finally:
            self._end_transaction()
        logger.debug("Transaction committed.")

    def rollback(self) -> None:
        try:
            self._conn.rollback()
        finally:
            self._end_transaction()
        logger.debug("Transaction rolled back.")

    def _end_transaction(self) -> None:
        self._transaction_active = False
        self._conn.autocommit = True

    def is_transaction_active(self) -> bool:
        return self._transaction_active

    # ── STATEMENTS ────────────────────────────────────────

    def execute(self, sql: str, params: Optional[Sequence[Any]] = None) -> int:
        """
        Execute a statement and return the number of affected rows.

        Outside a transaction the statement is committed on its own.
        """
        with self._conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.rowcount

    def fetch_one(self, sql: str, params: Optional[Sequence[Any]] = None) -> Optional[tuple]:
        with self._conn.cursor() as cur:
            cur.execute(sql, params)
            return cur.fetchone()

    def fetch_all(self, sql: str, params: Optional[Sequence[Any]] = None) -> list[tuple]:
        with self._conn.cursor() as cur:
            cur.execute(sql, params)
            return list(cur.fetchall())

    def close(self) -> None:
        """Roll back a transaction left open, then release or close the connection."""
        if self._transaction_active:
            logger.warning("Closing database handle with an open transaction; rolling back.")
            self.rollback()
        if self._pooled:
            release_connection(self._conn)
        else:
            self._conn.close()
        logger.debug("Database handle closed.")

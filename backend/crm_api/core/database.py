"""
PostgreSQL connection pool

The pool is the only process-wide resource of the API:
- created on startup (see crm_api.main lifespan), closed on shutdown
- created lazily on first use if the database was down at startup
- connections are borrowed per query through get_db_connection() /
  get_db_cursor() and always handed back, on success or error

Connections run in autocommit mode; every query is its own statement.
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional

from psycopg2 import pool as pg_pool
from psycopg2.extras import RealDictCursor

from .config import settings


logger = logging.getLogger(__name__)

_pool: Optional[pg_pool.ThreadedConnectionPool] = None
_slots: Optional[threading.BoundedSemaphore] = None
_pool_lock = threading.Lock()


# ============================================================================
# Pool lifecycle
# ============================================================================

def init_pool(
    minconn: Optional[int] = None,
    maxconn: Optional[int] = None,
    dsn_kwargs: Optional[Dict[str, Any]] = None
) -> pg_pool.ThreadedConnectionPool:
    """
    Create the shared connection pool (no-op if it already exists)

    Args:
        minconn: Connections opened up front (default: settings.DB_POOL_MIN)
        maxconn: Upper bound of concurrent connections (default: settings.DB_POOL_MAX)
        dsn_kwargs: psycopg2.connect arguments (default: settings.get_dsn_kwargs())

    Raises:
        psycopg2.OperationalError: If the database cannot be reached
    """
    global _pool, _slots

    with _pool_lock:
        if _pool is not None:
            return _pool

        minconn = settings.DB_POOL_MIN if minconn is None else minconn
        maxconn = settings.DB_POOL_MAX if maxconn is None else maxconn
        kwargs = dsn_kwargs if dsn_kwargs is not None else settings.get_dsn_kwargs()

        logger.info(
            f"Creating connection pool ({minconn}-{maxconn}) "
            f"for {kwargs.get('dbname')} at {kwargs.get('host')}:{kwargs.get('port')}"
        )
        _pool = pg_pool.ThreadedConnectionPool(minconn, maxconn, **kwargs)
        _slots = threading.BoundedSemaphore(maxconn)
        return _pool


def get_pool() -> pg_pool.ThreadedConnectionPool:
    """Return the shared pool, creating it if startup could not"""
    if _pool is None:
        return init_pool()
    return _pool


def close_pool() -> None:
    """Close every pooled connection (called on shutdown)"""
    global _pool, _slots

    with _pool_lock:
        if _pool is None:
            return
        try:
            _pool.closeall()
            logger.info("Connection pool closed")
        finally:
            _pool = None
            _slots = None


# ============================================================================
# Per-query access
# ============================================================================

@contextmanager
def get_db_connection():
    """
    Borrow a pooled connection for the duration of the block

    Waits for a free slot when all connections are in use.

    Usage:
        with get_db_connection() as conn:
            with conn.cursor() as cursor:
                cursor.execute("SELECT 1")
    """
    pool = get_pool()
    slots = _slots

    if slots is not None:
        slots.acquire()

    conn = None
    try:
        conn = pool.getconn()
        conn.autocommit = True
        yield conn
    finally:
        if conn is not None:
            pool.putconn(conn, close=bool(conn.closed))
        if slots is not None:
            slots.release()


@contextmanager
def get_db_cursor():
    """
    Borrow a pooled connection and open a RealDictCursor on it

    Rows come back as dictionaries keyed by column name.

    Usage:
        with get_db_cursor() as cursor:
            cursor.execute("SELECT * FROM products WHERE category = %s", (category,))
            rows = cursor.fetchall()
    """
    with get_db_connection() as conn:
        cursor = conn.cursor(cursor_factory=RealDictCursor)
        try:
            yield cursor
        finally:
            cursor.close()


def check_connection() -> float:
    """
    Run a trivial query against the database

    Returns:
        Round-trip latency in milliseconds

    Raises:
        psycopg2.Error: If the database is unreachable
    """
    start = time.time()
    with get_db_cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return round((time.time() - start) * 1000, 2)

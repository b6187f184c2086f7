from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

import mysql.connector

from ..core.exceptions import DomainError, StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_transaction(
    conn_factory: DatabaseConnection,
    *,
    isolation_level: Optional[str] = None,
    dictionary: bool = True,
) -> Iterator[Tuple[Any, Any]]:
    """One connection, one transaction.

    Commits when the block exits cleanly and rolls back on any exception.
    Driver errors (connectivity, constraint violations, deadlocks) and any
    other non-domain failure are re-raised as StoreError with the cause
    chained; domain errors pass through unchanged.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Cannot connect to %s: %s", conn_factory.describe(), e)
        raise StoreError(f"Database unavailable: {e}") from e

    try:
        conn.start_transaction(isolation_level=isolation_level or conn_factory.isolation_level)
        # Buffered so one cursor can run several statements in the same transaction.
        cur = conn.cursor(dictionary=dictionary, buffered=True)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _safe_rollback(conn)
        raise StoreError(f"Database error: {e}") from e
    except DomainError:
        _safe_rollback(conn)
        raise
    except Exception as e:
        _safe_rollback(conn)
        raise StoreError(f"Transaction failed: {type(e).__name__}: {e}") from e
    finally:
        conn.close()


def _safe_rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error as e:
        logger.warning("Rollback failed: %s", e)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

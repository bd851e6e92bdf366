from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import DuplicateKeyError, StoreError, StoreUnavailableError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cur)`` inside one transaction.

    Commits when the block exits cleanly and rolls back otherwise. Connector
    errors are re-raised as store errors so services never see driver types.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Cannot connect to record store: %s", e)
        raise StoreUnavailableError("Record store is unavailable") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        _rollback_quietly(conn)
        if e.errno == errorcode.ER_DUP_ENTRY:
            raise DuplicateKeyError(str(e)) from e
        raise StoreError(str(e)) from e
    except (mysql.connector.OperationalError, mysql.connector.InterfaceError) as e:
        _rollback_quietly(conn)
        raise StoreUnavailableError(str(e)) from e
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        raise StoreError(str(e)) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        _close_quietly(conn)


def _rollback_quietly(conn) -> None:
    # A dead connection cannot roll back; the original error is what callers need.
    try:
        conn.rollback()
    except mysql.connector.Error as e:
        logger.warning("Rollback failed: %s", e)


def _close_quietly(conn) -> None:
    try:
        conn.close()
    except mysql.connector.Error as e:
        logger.warning("Closing connection failed: %s", e)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Type

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.exceptions import DomainError
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


def translate_integrity_error(
    exc: IntegrityError,
    by_index: Mapping[str, tuple[Type[DomainError], str]],
) -> Exception:
    """Map a duplicate-key violation onto the domain error for that index.

    MySQL reports the violated index in the message, e.g.
    "Duplicate entry '7-2' for key 'memberships.uq_membership_slot'".
    Anything unrecognised is returned unchanged so the caller re-raises it.
    """

    if exc.errno != errorcode.ER_DUP_ENTRY:
        return exc

    message = str(getattr(exc, "msg", "") or exc)
    for index_name, (error_cls, text) in by_index.items():
        if index_name in message:
            return error_cls(text)
    return exc

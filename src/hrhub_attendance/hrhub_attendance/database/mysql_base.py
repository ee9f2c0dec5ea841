from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True) -> Iterator[Tuple[Any, Any]]:
    """Open a connection + cursor for one read and always close both."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME columns to datetime.time.

    mysql-connector hands TIME back as datetime.timedelta, some drivers and
    fixtures use datetime.time or an 'HH:MM[:SS]' string.
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60, second=total_seconds % 60)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

import mysql.connector

from ..core.exceptions import SourceUnavailable
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

T = TypeVar("T")


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return fetchall(cur)


async def run_query(fn: Callable[[], T], *, what: str) -> T:
    """Run a blocking connector call off the event loop.

    Connector failures surface as SourceUnavailable so callers can retry.
    """
    try:
        return await asyncio.to_thread(fn)
    except mysql.connector.Error as e:
        logger.error("Query failed (%s): %s", what, e)
        raise SourceUnavailable(f"{what}: {e}") from e


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00'), left for the record mapper to parse
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return time(hour=hours, minute=minutes, second=seconds)

    return value

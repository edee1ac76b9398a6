from __future__ import annotations

from typing import Any, Mapping, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all, run_query
from .repository import ProfileSource


class MySQLProfileSource(ProfileSource):
    """Profiles from ``users`` or ``auth_profiles`` (same column layout)."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = "users"):
        if table not in {"users", "auth_profiles"}:
            raise ValueError(f"Unsupported profile table: {table}")
        self._conn_factory = conn_factory
        self._table = table

    async def get_profile(self, owner_id: str) -> Optional[Mapping[str, Any]]:
        sql = f"""
            SELECT name, first_name AS firstName, last_name AS lastName,
                   display_name AS displayName, email,
                   profile_image_url AS profileImageUrl, photo_url AS photoURL, avatar
            FROM {self._table}
            WHERE user_id=%s
        """
        rows = await run_query(lambda: query_all(self._conn_factory, sql, (owner_id,)), what=f"{self._table} profile")
        return rows[0] if rows else None

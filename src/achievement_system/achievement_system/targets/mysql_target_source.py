from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all, run_query
from .repository import TargetSource


class MySQLTargetSource(TargetSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    async def find_targets(
        self,
        *,
        employee_id: Optional[str] = None,
        email: Optional[str] = None,
        role: Optional[str] = None,
    ) -> Sequence[Mapping[str, Any]]:
        if employee_id:
            column, value = "employee_id", employee_id
        elif email:
            column, value = "email", email
        elif role:
            column, value = "role", role
        else:
            return []

        sql = f"""
            SELECT num_meetings AS numMeetings, attended_meetings AS attendedMeetings,
                   duration_seconds AS durationSeconds, closing_amount AS closingAmount,
                   created_at AS createdAt
            FROM targets
            WHERE {column}=%s
            ORDER BY created_at DESC
        """
        return await run_query(lambda: query_all(self._conn_factory, sql, (value,)), what=f"targets by {column}")

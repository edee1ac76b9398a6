from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import RecordKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import normalize_mysql_time, query_all, run_query
from .model import AttendanceRecord, PerformanceRecord
from .repository import Record, RecordSource

_ATTENDANCE_COLUMNS = """
    user_id AS userId, work_date AS date, punch_in AS punchIn, punch_out AS punchOut, status
    FROM attendance_records
"""

_PERFORMANCE_COLUMNS = """
    user_id AS userId, report_date AS date, num_meetings AS numMeetings,
    positive_leads AS positiveLeads, meeting_duration AS meetingDuration,
    total_duration_seconds AS totalDurationSeconds,
    total_closing_amount AS totalClosingAmount, percentage_achieved AS percentageAchieved
    FROM daily_reports
"""


def _attendance(row: dict) -> AttendanceRecord:
    row["punchIn"] = normalize_mysql_time(row.get("punchIn"))
    row["punchOut"] = normalize_mysql_time(row.get("punchOut"))
    return AttendanceRecord.from_document(row)


def _performance(row: dict) -> PerformanceRecord:
    if not row.get("meetingDuration"):
        row.pop("meetingDuration", None)
    return PerformanceRecord.from_document(row)


class MySQLRecordSource(RecordSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _select(self, kind: RecordKind, where: str, params: tuple) -> list[Record]:
        if kind == RecordKind.ATTENDANCE:
            rows = query_all(self._conn_factory, f"SELECT {_ATTENDANCE_COLUMNS} {where}", params)
            return [_attendance(r) for r in rows]
        rows = query_all(self._conn_factory, f"SELECT {_PERFORMANCE_COLUMNS} {where}", params)
        return [_performance(r) for r in rows]

    async def query_records(self, owner_id: str, kind: RecordKind, start: date, end: date) -> Sequence[Record]:
        column = "work_date" if kind == RecordKind.ATTENDANCE else "report_date"
        where = f"WHERE user_id=%s AND {column} BETWEEN %s AND %s"
        return await run_query(
            lambda: self._select(kind, where, (owner_id, start, end)),
            what=f"{kind.value} records for {owner_id}",
        )

    async def query_all(self, kind: RecordKind) -> Sequence[Record]:
        return await run_query(lambda: self._select(kind, "", ()), what=f"all {kind.value} records")

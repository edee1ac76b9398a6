from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.time_window import week_bounds
from ..core.enums import AttendanceStatus, RecordKind
from ..records.repository import RecordSource
from .classifier import AttendanceClassifier, total_hours
from .gate import PunchGate
from .model import AttendanceRecord, AttendanceSummary, GateDecision, WeekDayStatus

logger = logging.getLogger(__name__)

_DAY_LETTERS = ("M", "T", "W", "T", "F", "S", "S")
_SUNDAY = 6


class AttendanceService:
    def __init__(
        self,
        records: RecordSource,
        *,
        classifier: Optional[AttendanceClassifier] = None,
        gate: Optional[PunchGate] = None,
        week_starts_on: int = 0,
    ):
        self._records = records
        self._classifier = classifier or AttendanceClassifier()
        self._gate = gate or PunchGate(self._classifier.rules)
        self._week_starts_on = int(week_starts_on)

    def classify(self, record: AttendanceRecord) -> AttendanceStatus:
        return self._classifier.classify(record)

    async def _fetch(self, owner_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        return await self._records.query_records(owner_id, RecordKind.ATTENDANCE, start, end)

    @staticmethod
    def _by_date(rows: Sequence[AttendanceRecord]) -> dict[date, AttendanceRecord]:
        # One record per day is expected; keep the most complete one if the store has duplicates.
        out: dict[date, AttendanceRecord] = {}
        for r in rows:
            existing = out.get(r.work_date)
            if existing is None or (existing.punch_out is None and r.punch_out is not None):
                out[r.work_date] = r
        return out

    async def get_day_status(self, owner_id: str, work_date: date) -> AttendanceStatus:
        rows = self._by_date(await self._fetch(owner_id, work_date, work_date))
        record = rows.get(work_date) or AttendanceRecord(owner_id=owner_id, work_date=work_date)
        return self.classify(record)

    async def punch_gate(self, owner_id: str, *, now: datetime | None = None) -> GateDecision:
        now = now or now_local()
        today = now.date()
        yesterday = today - timedelta(days=1)
        rows = self._by_date(await self._fetch(owner_id, yesterday, today))
        return self._gate.evaluate(today=rows.get(today), previous=rows.get(yesterday), now=now)

    async def monthly_summary(self, owner_id: str, year: int, month: int, *, today: date | None = None) -> AttendanceSummary:
        """Status counts for a month up to ``today``.

        Sundays are not working days; any other past day without a record
        counts as On Leave.
        """
        today = today or now_local().date()
        first = date(year, month, 1)
        last = date(year, month, calendar.monthrange(year, month)[1])
        end = min(last, today)
        if end < first:
            return AttendanceSummary(year=year, month=month)

        rows = self._by_date(await self._fetch(owner_id, first, end))
        counts = {s: 0 for s in AttendanceStatus}
        dates: dict[str, str] = {}

        day = first
        while day <= end:
            record = rows.get(day)
            if record is not None:
                status = self.classify(record)
            elif day.weekday() == _SUNDAY:
                day += timedelta(days=1)
                continue
            else:
                status = AttendanceStatus.ON_LEAVE
            counts[status] += 1
            dates[day.isoformat()] = status.value
            day += timedelta(days=1)

        return AttendanceSummary(
            year=year,
            month=month,
            present=counts[AttendanceStatus.PRESENT],
            half_day=counts[AttendanceStatus.HALF_DAY],
            on_leave=counts[AttendanceStatus.ON_LEAVE],
            dates=dates,
        )

    async def week_strip(self, owner_id: str, *, today: date | None = None) -> list[WeekDayStatus]:
        """Working days (Mon-Sat) of the current week; future days have no status."""
        today = today or now_local().date()
        window = week_bounds(today, self._week_starts_on)
        rows = self._by_date(await self._fetch(owner_id, window.start, window.end))

        strip = []
        for offset in range(7):
            day = window.start + timedelta(days=offset)
            if day.weekday() == _SUNDAY:
                continue
            if day > today:
                status = None
            elif day in rows:
                status = self.classify(rows[day])
            else:
                status = AttendanceStatus.ON_LEAVE
            strip.append(WeekDayStatus(day=_DAY_LETTERS[day.weekday()], work_date=day, status=status))
        return strip

    def to_ui(self, record: AttendanceRecord) -> dict:
        decision = self._classifier.decide(record)
        return {
            "date": record.work_date.strftime("%Y-%m-%d"),
            "punch_in": record.punch_in.strftime("%H:%M") if record.punch_in else "-",
            "punch_out": record.punch_out.strftime("%H:%M") if record.punch_out else "-",
            "status": decision.status.value,
            "note": decision.note or "",
            "total_hours": total_hours(record),
        }

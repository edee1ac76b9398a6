from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

import pytest

from achievement_system.core.enums import RecordKind
from achievement_system.core.exceptions import SourceUnavailable
from achievement_system.records.model import AttendanceRecord, PerformanceRecord


class InMemoryRecords:
    """RecordSource over plain lists. Windows listed in ``failing`` raise SourceUnavailable."""

    def __init__(self, attendance: Iterable[AttendanceRecord] = (), performance: Iterable[PerformanceRecord] = ()):
        self.attendance = list(attendance)
        self.performance = list(performance)
        self.failing: set[tuple[date, date]] = set()
        self.errors: dict[tuple[date, date], Exception] = {}
        self.calls: list[tuple[str, RecordKind, date, date]] = []
        self.down = False

    def _rows(self, kind: RecordKind):
        return self.attendance if kind == RecordKind.ATTENDANCE else self.performance

    async def query_records(self, owner_id: str, kind: RecordKind, start: date, end: date):
        self.calls.append((owner_id, kind, start, end))
        if self.down or (start, end) in self.failing:
            raise SourceUnavailable(f"records {start}..{end} unavailable")
        if (start, end) in self.errors:
            raise self.errors[(start, end)]
        out = []
        for r in self._rows(kind):
            d = r.work_date if kind == RecordKind.ATTENDANCE else r.report_date
            if r.owner_id == owner_id and (d is None or start <= d <= end):
                out.append(r)
        return out

    async def query_all(self, kind: RecordKind):
        if self.down:
            raise SourceUnavailable("records unavailable")
        return list(self._rows(kind))


class InMemoryTargets:
    def __init__(self, docs: Iterable[Mapping[str, Any]] = ()):
        self.docs = list(docs)
        self.calls = 0

    async def find_targets(self, *, employee_id=None, email=None, role=None):
        self.calls += 1
        if employee_id is not None:
            return [d for d in self.docs if d.get("employeeId") == employee_id]
        if email is not None:
            return [d for d in self.docs if d.get("email") == email]
        return [d for d in self.docs if d.get("role") == role]


class InMemoryProfiles:
    def __init__(self, docs: Optional[Mapping[str, Mapping[str, Any]]] = None, *, broken: Iterable[str] = ()):
        self.docs = dict(docs or {})
        self.broken = set(broken)

    async def get_profile(self, owner_id: str):
        if owner_id in self.broken:
            raise SourceUnavailable(f"profile {owner_id} unavailable")
        return self.docs.get(owner_id)


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2025, 1, 15, 9, 0, 0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def records() -> InMemoryRecords:
    return InMemoryRecords()


@pytest.fixture
def targets() -> InMemoryTargets:
    return InMemoryTargets()


@pytest.fixture
def profiles() -> InMemoryProfiles:
    return InMemoryProfiles()


def perf(owner_id: str, d: Optional[date], **fields) -> PerformanceRecord:
    return PerformanceRecord(owner_id=owner_id, report_date=d, **fields)


@pytest.fixture
def make_perf():
    return perf

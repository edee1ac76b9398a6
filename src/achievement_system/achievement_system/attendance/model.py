from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import parse_hhmm
from ..core.constants import (
    DEFAULT_PUNCH_IN_DEADLINE,
    DEFAULT_PUNCH_OUT_MINIMUM,
    DEFAULT_PUNCH_REOPEN_TIME,
)
from ..core.enums import AttendanceStatus, PunchAction
from ..records.model import AttendanceRecord

__all__ = [
    "AttendanceRecord",
    "AttendanceRules",
    "AttendanceSummary",
    "GateDecision",
    "WeekDayStatus",
]


@dataclass(frozen=True)
class AttendanceRules:
    """Wall-clock deadlines as "HH:MM" strings, validated on construction."""

    punch_in_deadline: str = DEFAULT_PUNCH_IN_DEADLINE
    punch_out_minimum: str = DEFAULT_PUNCH_OUT_MINIMUM
    reopen_time: str = DEFAULT_PUNCH_REOPEN_TIME

    def __post_init__(self) -> None:
        parse_hhmm(self.punch_in_deadline)
        parse_hhmm(self.punch_out_minimum)
        parse_hhmm(self.reopen_time)


@dataclass(frozen=True)
class GateDecision:
    """Whether the next punch action is allowed right now (advisory, not stored)."""

    action: PunchAction
    allowed: bool
    reason: str
    reopens_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceSummary:
    year: int
    month: int
    present: int = 0
    half_day: int = 0
    on_leave: int = 0
    dates: dict = field(default_factory=dict, compare=False)

    @property
    def total_days(self) -> int:
        return self.present + self.half_day + self.on_leave


@dataclass(frozen=True)
class WeekDayStatus:
    day: str
    work_date: date
    status: Optional[AttendanceStatus]

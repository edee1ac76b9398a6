from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Derived attendance status shown for one calendar day."""

    PRESENT = "Present"
    HALF_DAY = "Half Day"
    ON_LEAVE = "On Leave"


class PunchState(str, Enum):
    """Where a day is in the punch-in / punch-out lifecycle."""

    UNPUNCHED = "UNPUNCHED"
    PUNCHED_IN_ONLY = "PUNCHED_IN_ONLY"
    COMPLETE = "COMPLETE"


class PunchAction(str, Enum):
    PUNCH_IN = "PUNCH_IN"
    PUNCH_OUT = "PUNCH_OUT"


class RecordKind(str, Enum):
    ATTENDANCE = "attendance"
    PERFORMANCE = "performance"


class PeriodKind(str, Enum):
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"


class DurationFormat(str, Enum):
    """Which branch of the duration parser produced a value."""

    COLON = "COLON"
    FREE_TEXT = "FREE_TEXT"
    NUMERIC = "NUMERIC"
    UNPARSEABLE = "UNPARSEABLE"


class QueryKind(str, Enum):
    """Cached query kinds; all share one TTL."""

    TARGETS = "targets"
    CURRENT_WEEK = "current_week"
    WEEKLY_SERIES = "weekly_series"
    QUARTERLY_SERIES = "quarterly_series"
    HALF_YEARLY_SERIES = "half_yearly_series"
    LEADERBOARD = "leaderboard"

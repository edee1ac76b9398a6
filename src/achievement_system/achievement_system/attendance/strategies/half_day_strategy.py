from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord, AttendanceRules
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Punched in but the day is not complete; provisionally short."""

    def decide(self, record: AttendanceRecord, rules: AttendanceRules) -> StatusDecision:
        if record.punch_out is not None:
            return StatusDecision(status=AttendanceStatus.HALF_DAY, note="punch-out before punch-in ignored")
        return StatusDecision(status=AttendanceStatus.HALF_DAY)

from __future__ import annotations

from ...common.time_window import is_before_or_at
from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord, AttendanceRules
from .base import AttendanceStrategy, StatusDecision


class CompleteDayStrategy(AttendanceStrategy):
    """Both punches recorded: late punch-in or early punch-out makes it a half day."""

    def decide(self, record: AttendanceRecord, rules: AttendanceRules) -> StatusDecision:
        late_in = not is_before_or_at(record.punch_in, rules.punch_in_deadline)
        early_out = not is_before_or_at(rules.punch_out_minimum, record.punch_out)

        if late_in and early_out:
            return StatusDecision(status=AttendanceStatus.HALF_DAY, note="late punch-in, early punch-out")
        if late_in:
            return StatusDecision(status=AttendanceStatus.HALF_DAY, note="late punch-in")
        if early_out:
            return StatusDecision(status=AttendanceStatus.HALF_DAY, note="early punch-out")
        return StatusDecision(status=AttendanceStatus.PRESENT)

from __future__ import annotations

from ...core.enums import AttendanceStatus
from ..model import AttendanceRecord, AttendanceRules
from .base import AttendanceStrategy, StatusDecision


class OnLeaveStrategy(AttendanceStrategy):
    """No usable punch-in for the day."""

    def decide(self, record: AttendanceRecord, rules: AttendanceRules) -> StatusDecision:
        if record.punch_out is not None:
            return StatusDecision(status=AttendanceStatus.ON_LEAVE, note="punch-out without punch-in")
        return StatusDecision(status=AttendanceStatus.ON_LEAVE)

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, PunchState
from .factory import AttendanceStrategyFactory, punch_state
from .model import AttendanceRecord, AttendanceRules
from .strategies.base import StatusDecision


class AttendanceClassifier:
    """Pure projection of a day's punches onto an AttendanceStatus.

    Never raises for record data; anomalies degrade to a safer status.
    """

    def __init__(self, rules: Optional[AttendanceRules] = None, *, factory: Optional[AttendanceStrategyFactory] = None):
        self.rules = rules or AttendanceRules()
        self._factory = factory or AttendanceStrategyFactory()

    def decide(self, record: AttendanceRecord) -> StatusDecision:
        strategy = self._factory.for_record(record)
        return strategy.decide(record, self.rules)

    def classify(self, record: AttendanceRecord) -> AttendanceStatus:
        return self.decide(record).status


def total_hours(record: AttendanceRecord) -> float:
    """Hours between punch-in and punch-out; 0 unless the day is complete."""
    if punch_state(record) != PunchState.COMPLETE:
        return 0.0
    start = datetime.combine(record.work_date, record.punch_in)
    end = datetime.combine(record.work_date, record.punch_out)
    return round((end - start).total_seconds() / 3600, 2)

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.enums import PunchState
from .model import AttendanceRecord
from .strategies.base import AttendanceStrategy
from .strategies.complete_day_strategy import CompleteDayStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.on_leave_strategy import OnLeaveStrategy

logger = logging.getLogger(__name__)


def punch_state(record: AttendanceRecord) -> PunchState:
    """Project a record onto the day's state machine.

    A punch-out earlier than the punch-in is a data anomaly and is ignored.
    """
    if record.punch_in is None:
        if record.punch_out is not None:
            logger.warning("Punch-out without punch-in for user %s on %s", record.owner_id, record.work_date)
        return PunchState.UNPUNCHED

    if record.punch_out is None:
        return PunchState.PUNCHED_IN_ONLY

    if record.punch_out < record.punch_in:
        logger.warning(
            "Punch-out %s before punch-in %s for user %s on %s; ignoring punch-out",
            record.punch_out,
            record.punch_in,
            record.owner_id,
            record.work_date,
        )
        return PunchState.PUNCHED_IN_ONLY

    return PunchState.COMPLETE


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose the status strategy from the day's punch state."""

    def for_record(self, record: AttendanceRecord) -> AttendanceStrategy:
        state = punch_state(record)
        if state == PunchState.UNPUNCHED:
            return OnLeaveStrategy()
        if state == PunchState.PUNCHED_IN_ONLY:
            return HalfDayStrategy()
        return CompleteDayStrategy()

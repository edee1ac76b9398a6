from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import minute_of_day, parse_hhmm
from ..core.enums import PunchAction, PunchState
from .factory import punch_state
from .model import AttendanceRecord, AttendanceRules, GateDecision


class PunchGate:
    """Advisory check for whether a punch is allowed at ``now``.

    Recomputed from the wall clock on every call at minute granularity, so a
    client can poll it once a minute; nothing here is persisted.
    """

    def __init__(self, rules: Optional[AttendanceRules] = None):
        self.rules = rules or AttendanceRules()

    def _reopen_on(self, day: date) -> datetime:
        return datetime.combine(day, parse_hhmm(self.rules.reopen_time))

    def evaluate(
        self,
        *,
        today: Optional[AttendanceRecord],
        previous: Optional[AttendanceRecord],
        now: datetime,
    ) -> GateDecision:
        now = now.replace(second=0, microsecond=0)
        state = punch_state(today) if today else PunchState.UNPUNCHED

        if state == PunchState.COMPLETE:
            return GateDecision(
                action=PunchAction.PUNCH_IN,
                allowed=False,
                reason="Already punched out today",
                reopens_at=self._reopen_on(now.date() + timedelta(days=1)),
            )

        if state == PunchState.PUNCHED_IN_ONLY:
            return GateDecision(action=PunchAction.PUNCH_OUT, allowed=True, reason="Punch-out available")

        current = minute_of_day(now)
        if previous and punch_state(previous) == PunchState.COMPLETE and current < minute_of_day(self.rules.reopen_time):
            return GateDecision(
                action=PunchAction.PUNCH_IN,
                allowed=False,
                reason=f"Punch-in reopens at {self.rules.reopen_time}",
                reopens_at=self._reopen_on(now.date()),
            )

        if current > minute_of_day(self.rules.punch_in_deadline):
            return GateDecision(
                action=PunchAction.PUNCH_IN,
                allowed=False,
                reason=f"Punch-in closed after {self.rules.punch_in_deadline}",
                reopens_at=self._reopen_on(now.date() + timedelta(days=1)),
            )

        return GateDecision(action=PunchAction.PUNCH_IN, allowed=True, reason="Punch-in available")

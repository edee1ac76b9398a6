from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..core.constants import (
    DEFAULT_ATTENDED_MEETINGS_TARGET,
    DEFAULT_CLOSING_AMOUNT_TARGET,
    DEFAULT_DURATION_TARGET_SECONDS,
    DEFAULT_NUM_MEETINGS_TARGET,
)
from ..core.enums import PeriodKind

# Targets are configured per week; longer windows scale them.
PERIOD_TARGET_MULTIPLIER = {
    PeriodKind.WEEK: 1,
    PeriodKind.MONTH: 4,
    PeriodKind.QUARTER: 13,
}


@dataclass(frozen=True)
class TargetConfig:
    """Weekly numeric goals for one user (read-only to the engine)."""

    owner_id: str
    num_meetings: float = DEFAULT_NUM_MEETINGS_TARGET
    attended_meetings: float = DEFAULT_ATTENDED_MEETINGS_TARGET
    duration_seconds: float = DEFAULT_DURATION_TARGET_SECONDS
    closing_amount: float = DEFAULT_CLOSING_AMOUNT_TARGET
    created_at: Optional[datetime] = None
    is_default: bool = False

    def scaled(self, period: Optional[PeriodKind], *, days: int = 7) -> "TargetConfig":
        """Targets for a window; a custom (period-less) window scales by days / 7."""
        if period is None:
            factor = days / 7
        else:
            factor = PERIOD_TARGET_MULTIPLIER.get(period, 1)
        if factor == 1:
            return self
        return replace(
            self,
            num_meetings=self.num_meetings * factor,
            attended_meetings=self.attended_meetings * factor,
            duration_seconds=self.duration_seconds * factor,
            closing_amount=self.closing_amount * factor,
        )

    def as_dict(self) -> dict:
        return {
            "owner_id": self.owner_id,
            "num_meetings": self.num_meetings,
            "attended_meetings": self.attended_meetings,
            "duration_seconds": self.duration_seconds,
            "closing_amount": self.closing_amount,
            "is_default": self.is_default,
        }

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.duration import format_hours
from ..common.time_window import Window


@dataclass(frozen=True)
class PeriodTotals:
    """Raw sums over every performance record in a window."""

    meetings_held: float = 0
    meetings_attended: float = 0
    total_duration_seconds: int = 0
    total_closing_amount: float = 0
    record_count: int = 0

    @property
    def duration_hours(self) -> float:
        return round(self.total_duration_seconds / 3600, 2)


@dataclass(frozen=True)
class AchievementScore:
    owner_id: str
    period_label: str
    window: Window
    totals: PeriodTotals
    component_percentages: tuple[float, float, float, float]
    weighted_percentage: float

    def as_dict(self) -> dict:
        meetings, attended, duration, closing = self.component_percentages
        return {
            "owner_id": self.owner_id,
            "period_label": self.period_label,
            "start": self.window.start.isoformat(),
            "end": self.window.end.isoformat(),
            "totals": {
                "meetings_held": self.totals.meetings_held,
                "meetings_attended": self.totals.meetings_attended,
                "duration_hours": self.totals.duration_hours,
                "duration": format_hours(self.totals.total_duration_seconds),
                "closing_amount": self.totals.total_closing_amount,
            },
            "components": {
                "meetings": meetings,
                "attended": attended,
                "duration": duration,
                "closing": closing,
            },
            "percentage_achieved": self.weighted_percentage,
        }


@dataclass(frozen=True)
class LabeledSeries:
    labels: list[str] = field(default_factory=list)
    data: list[float] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {"labels": list(self.labels), "data": list(self.data)}


@dataclass(frozen=True)
class PeriodComparison:
    current: AchievementScore
    previous_percentage: float

    @property
    def change(self) -> float:
        return round(self.current.weighted_percentage - self.previous_percentage, 1)

    def as_dict(self) -> dict:
        return {
            "current": self.current.as_dict(),
            "previous_percentage": self.previous_percentage,
            "change": self.change,
        }


@dataclass(frozen=True)
class PersonalBest:
    highest: float
    average: float
    report_count: int
    best_label: Optional[str] = None

from __future__ import annotations

from ...core.constants import ACHIEVEMENT_WEIGHTS
from ...targets.model import TargetConfig
from ..model import PeriodTotals
from .base import ScoreCalculator


def capped_percentage(achieved: float, target: float) -> float:
    """min(100, 100 * achieved / target); a zero or negative target scores 0."""
    if not target or target <= 0:
        return 0.0
    pct = 100.0 * max(achieved, 0) / target
    return min(pct, 100.0)


class WeightedScoreCalculator(ScoreCalculator):
    """Standard rule: meetings 25%, attended 25%, duration 20%, closing 30%.

    Each axis is capped at 100 before blending, the blend is clamped to
    [0, 100] and rounded to one decimal.
    """

    def __init__(self, weights: tuple[float, float, float, float] = ACHIEVEMENT_WEIGHTS):
        if len(weights) != 4:
            raise ValueError("Exactly four weights are required")
        self._weights = tuple(float(w) for w in weights)

    def component_percentages(self, totals: PeriodTotals, targets: TargetConfig) -> tuple[float, float, float, float]:
        return (
            capped_percentage(totals.meetings_held, targets.num_meetings),
            capped_percentage(totals.meetings_attended, targets.attended_meetings),
            capped_percentage(totals.total_duration_seconds, targets.duration_seconds),
            capped_percentage(totals.total_closing_amount, targets.closing_amount),
        )

    def weighted(self, components: tuple[float, float, float, float]) -> float:
        score = sum(c * w for c, w in zip(components, self._weights))
        return round(min(max(score, 0.0), 100.0), 1)

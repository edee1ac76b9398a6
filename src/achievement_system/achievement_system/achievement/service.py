from __future__ import annotations

import asyncio
import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.time_window import Window, bounds_for, month_bounds, previous_week, shift_months, week_bounds
from ..core.enums import PeriodKind, RecordKind
from ..records.model import PerformanceRecord
from ..records.repository import RecordSource
from ..targets.model import TargetConfig
from ..targets.service import TargetResolver
from .calculator.base import ScoreCalculator
from .calculator.weighted_calculator import WeightedScoreCalculator
from .model import AchievementScore, LabeledSeries, PeriodComparison, PeriodTotals, PersonalBest

logger = logging.getLogger(__name__)


def sum_totals(records: Iterable[PerformanceRecord]) -> PeriodTotals:
    meetings = attended = closing = 0.0
    seconds = 0
    count = 0
    for r in records:
        meetings += r.meetings_held
        attended += r.meetings_attended
        seconds += r.total_duration_seconds
        closing += r.total_closing_amount
        count += 1
    return PeriodTotals(
        meetings_held=meetings,
        meetings_attended=attended,
        total_duration_seconds=seconds,
        total_closing_amount=closing,
        record_count=count,
    )


def period_label(window: Window, index: Optional[int] = None) -> str:
    if window.period == PeriodKind.MONTH:
        return window.start.strftime("%b")
    if window.period == PeriodKind.QUARTER:
        return f"Q{(window.start.month - 1) // 3 + 1} {window.start.year}"
    if window.period == PeriodKind.WEEK and index is not None:
        return f"Week {index}"
    return f"{window.start:%d %b} - {window.end:%d %b}"


class AchievementAggregator:
    """Turn a user's performance records for a window into one weighted score."""

    def __init__(
        self,
        records: RecordSource,
        targets: TargetResolver,
        *,
        calculator: Optional[ScoreCalculator] = None,
        week_starts_on: int = 0,
    ):
        self._records = records
        self._targets = targets
        self._calculator = calculator or WeightedScoreCalculator()
        self._week_starts_on = int(week_starts_on)

    async def _fetch(self, owner_id: str, window: Window) -> Sequence[PerformanceRecord]:
        return await self._records.query_records(owner_id, RecordKind.PERFORMANCE, window.start, window.end)

    def score(
        self,
        owner_id: str,
        window: Window,
        records: Iterable[PerformanceRecord],
        targets: TargetConfig,
        *,
        label: Optional[str] = None,
    ) -> AchievementScore:
        # Sources may return records outside the window; only in-window ones count.
        totals = sum_totals(r for r in records if r.report_date is None or window.contains(r.report_date))
        scaled = targets.scaled(window.period, days=window.days)
        components = self._calculator.component_percentages(totals, scaled)
        return AchievementScore(
            owner_id=owner_id,
            period_label=label or period_label(window),
            window=window,
            totals=totals,
            component_percentages=tuple(round(c, 1) for c in components),
            weighted_percentage=self._calculator.weighted(components),
        )

    async def compute_achievement(
        self,
        owner_id: str,
        window: Window,
        *,
        targets: Optional[TargetConfig] = None,
        label: Optional[str] = None,
    ) -> AchievementScore:
        if targets is None:
            targets = await self._targets.resolve_targets(owner_id)
        records = await self._fetch(owner_id, window)
        return self.score(owner_id, window, records, targets, label=label)

    def sub_windows(self, period: PeriodKind, count: int, today: date) -> list[Window]:
        """``count`` consecutive windows ending with the one containing ``today``, oldest first."""
        windows = []
        for back in range(count - 1, -1, -1):
            if period == PeriodKind.WEEK:
                anchor = week_bounds(today, self._week_starts_on).start
                windows.append(week_bounds(anchor - timedelta(weeks=back), self._week_starts_on))
            elif period == PeriodKind.MONTH:
                windows.append(month_bounds(shift_months(today, -back)))
            else:
                windows.append(bounds_for(shift_months(today, -3 * back), PeriodKind.QUARTER))
        return windows

    async def compute_series(
        self,
        owner_id: str,
        period: PeriodKind,
        count: int,
        *,
        today: Optional[date] = None,
        targets: Optional[TargetConfig] = None,
    ) -> LabeledSeries:
        """Scores for ``count`` periods in chronological order.

        A sub-window that fails for any reason contributes a 0 entry instead
        of aborting the whole series; cancellation still propagates.
        """
        today = today or now_local().date()
        if targets is None:
            targets = await self._targets.resolve_targets(owner_id)
        windows = self.sub_windows(period, count, today)
        labels = [period_label(w, i + 1) for i, w in enumerate(windows)]

        results = await asyncio.gather(
            *(self.compute_achievement(owner_id, w, targets=targets, label=lbl) for w, lbl in zip(windows, labels)),
            return_exceptions=True,
        )

        data: list[float] = []
        for lbl, result in zip(labels, results):
            if isinstance(result, Exception):
                logger.warning("Could not load %s for user %s: %r", lbl, owner_id, result)
                data.append(0.0)
            elif isinstance(result, BaseException):
                raise result
            else:
                data.append(result.weighted_percentage)
        return LabeledSeries(labels=labels, data=data)

    async def compare_with_previous(
        self,
        owner_id: str,
        *,
        today: Optional[date] = None,
        targets: Optional[TargetConfig] = None,
    ) -> PeriodComparison:
        """Current week against the week before; both lookups run concurrently."""
        today = today or now_local().date()
        current_window = week_bounds(today, self._week_starts_on)
        if targets is None:
            targets = await self._targets.resolve_targets(owner_id)
        current, previous = await asyncio.gather(
            self.compute_achievement(owner_id, current_window, targets=targets),
            self.compute_achievement(owner_id, previous_week(current_window), targets=targets),
        )
        return PeriodComparison(current=current, previous_percentage=previous.weighted_percentage)

    async def personal_best(self, owner_id: str) -> PersonalBest:
        """Highest and average of the per-report ``percentage_achieved`` snapshots.

        Like the leaderboard this trusts the value stored on each report rather
        than recomputing it.
        """
        rows = await self._records.query_records(owner_id, RecordKind.PERFORMANCE, date.min, date.max)
        scored = [r for r in rows if r.percentage_achieved]
        if not scored:
            return PersonalBest(highest=0.0, average=0.0, report_count=0)
        best = max(scored, key=lambda r: r.percentage_achieved)
        average = sum(r.percentage_achieved for r in scored) / len(scored)
        return PersonalBest(
            highest=best.percentage_achieved,
            average=round(average, 1),
            report_count=len(scored),
            best_label=best.report_date.isoformat() if best.report_date else None,
        )

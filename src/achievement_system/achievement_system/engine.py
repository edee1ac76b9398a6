from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from .achievement.model import AchievementScore, LabeledSeries, PeriodComparison, PersonalBest
from .achievement.service import AchievementAggregator
from .attendance.model import AttendanceRecord, GateDecision
from .attendance.service import AttendanceService
from .cache.result_cache import ResultCache
from .common.datetime_utils import now_local
from .common.time_window import Window, bounds_for, week_bounds
from .common.validators import require_non_empty, require_positive_int
from .core.constants import DEFAULT_LEADERBOARD_SIZE
from .core.enums import AttendanceStatus, PeriodKind, QueryKind
from .leaderboard.model import LeaderboardEntry
from .leaderboard.service import LeaderboardRanker
from .targets.model import TargetConfig
from .targets.service import TargetResolver

# Named series shown on the target screens: (period, number of periods).
SERIES_PRESETS = {
    QueryKind.WEEKLY_SERIES: (PeriodKind.WEEK, 5),
    QueryKind.QUARTERLY_SERIES: (PeriodKind.MONTH, 3),
    QueryKind.HALF_YEARLY_SERIES: (PeriodKind.MONTH, 6),
}

LEADERBOARD_KEY = "*"


def series_kind(period: PeriodKind, count: int) -> QueryKind:
    if period == PeriodKind.WEEK:
        return QueryKind.WEEKLY_SERIES
    if period == PeriodKind.MONTH and count <= 3:
        return QueryKind.QUARTERLY_SERIES
    return QueryKind.HALF_YEARLY_SERIES


class PerformanceEngine:
    """The operations exposed to the application layer.

    Target lookups, series and the leaderboard go through the shared
    ResultCache; attendance classification is a pure call.
    """

    def __init__(
        self,
        *,
        attendance: AttendanceService,
        aggregator: AchievementAggregator,
        targets: TargetResolver,
        leaderboard: LeaderboardRanker,
        cache: ResultCache,
        week_starts_on: int = 0,
    ):
        self.attendance = attendance
        self.aggregator = aggregator
        self.targets = targets
        self.leaderboard = leaderboard
        self.cache = cache
        self._week_starts_on = int(week_starts_on)

    def classify_attendance(self, record: AttendanceRecord) -> AttendanceStatus:
        return self.attendance.classify(record)

    async def punch_gate(self, owner_id: str, *, now: Optional[datetime] = None) -> GateDecision:
        return await self.attendance.punch_gate(owner_id, now=now)

    async def resolve_targets(self, owner_id: str) -> TargetConfig:
        owner_id = require_non_empty(owner_id, "owner_id")
        return await self.cache.get_or_compute(
            (owner_id, QueryKind.TARGETS),
            lambda: self.targets.resolve_targets(owner_id),
        )

    async def compute_achievement(self, owner_id: str, window: Window) -> AchievementScore:
        targets = await self.resolve_targets(owner_id)
        return await self.aggregator.compute_achievement(owner_id, window, targets=targets)

    async def current_week(self, owner_id: str, *, today: Optional[date] = None) -> AchievementScore:
        window = week_bounds(today or now_local().date(), self._week_starts_on)
        return await self.cache.get_or_compute(
            (owner_id, QueryKind.CURRENT_WEEK, window.start),
            lambda: self.compute_achievement(owner_id, window),
        )

    async def compute_series(
        self,
        owner_id: str,
        period: PeriodKind,
        count: int,
        *,
        today: Optional[date] = None,
    ) -> LabeledSeries:
        count = require_positive_int(count, "count")
        today = today or now_local().date()
        # keyed by the start of the newest sub-window
        anchor = bounds_for(today, period, self._week_starts_on).start

        async def compute() -> LabeledSeries:
            targets = await self.resolve_targets(owner_id)
            return await self.aggregator.compute_series(owner_id, period, count, today=today, targets=targets)

        return await self.cache.get_or_compute((owner_id, series_kind(period, count), period, count, anchor), compute)

    async def preset_series(self, owner_id: str, kind: QueryKind, *, today: Optional[date] = None) -> LabeledSeries:
        period, count = SERIES_PRESETS[kind]
        return await self.compute_series(owner_id, period, count, today=today)

    async def compare_with_previous(self, owner_id: str, *, today: Optional[date] = None) -> PeriodComparison:
        targets = await self.resolve_targets(owner_id)
        return await self.aggregator.compare_with_previous(owner_id, today=today, targets=targets)

    async def personal_best(self, owner_id: str) -> PersonalBest:
        return await self.aggregator.personal_best(owner_id)

    async def rank_leaderboard(self, n: int = DEFAULT_LEADERBOARD_SIZE) -> list[LeaderboardEntry]:
        n = require_positive_int(n, "n")
        return await self.cache.get_or_compute(
            (LEADERBOARD_KEY, QueryKind.LEADERBOARD, n),
            lambda: self.leaderboard.top_n(n),
        )

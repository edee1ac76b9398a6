from __future__ import annotations

import asyncio
from datetime import date
from typing import Iterable

from ..core.enums import RecordKind
from ..records.model import PerformanceRecord
from ..records.repository import RecordSource
from ..users.service import ProfileResolver
from .model import LeaderboardEntry, UserAverage


def average_by_user(records: Iterable[PerformanceRecord]) -> list[UserAverage]:
    """Average the stored ``percentage_achieved`` of every report per user.

    A report without the field counts as 0. This deliberately does not
    recompute scores with the weighted formula.
    """
    totals: dict[str, list] = {}
    for r in records:
        if not r.owner_id:
            continue
        acc = totals.setdefault(r.owner_id, [0.0, 0, None])
        acc[0] += r.percentage_achieved or 0.0
        acc[1] += 1
        if r.report_date is not None and (acc[2] is None or r.report_date > acc[2]):
            acc[2] = r.report_date

    return [
        UserAverage(owner_id=owner_id, percentage_achieved=total / count, report_count=count, latest_report_date=latest)
        for owner_id, (total, count, latest) in totals.items()
    ]


def rank(averages: Iterable[UserAverage]) -> list[UserAverage]:
    """Average desc, then most recent report desc, then user id for a stable order."""

    def key(u: UserAverage):
        latest = (u.latest_report_date or date.min).toordinal()
        return (-u.percentage_achieved, -latest, u.owner_id)

    return sorted(averages, key=key)


class LeaderboardRanker:
    def __init__(self, records: RecordSource, profiles: ProfileResolver):
        self._records = records
        self._profiles = profiles

    async def top_n(self, n: int) -> list[LeaderboardEntry]:
        if n <= 0:
            return []
        rows = await self._records.query_all(RecordKind.PERFORMANCE)
        top = rank(average_by_user(rows))[:n]

        profiles = await asyncio.gather(*(self._profiles.resolve(u.owner_id) for u in top))
        return [
            LeaderboardEntry(
                rank=i + 1,
                owner_id=u.owner_id,
                name=p.name,
                profile_image=p.profile_image,
                percentage_achieved=round(u.percentage_achieved, 1),
                latest_report_date=u.latest_report_date,
            )
            for i, (u, p) in enumerate(zip(top, profiles))
        ]

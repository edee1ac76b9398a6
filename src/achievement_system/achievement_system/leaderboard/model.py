from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class UserAverage:
    owner_id: str
    percentage_achieved: float
    report_count: int
    latest_report_date: Optional[date]


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    owner_id: str
    name: str
    profile_image: Optional[str]
    percentage_achieved: float
    latest_report_date: Optional[date] = None

    def as_dict(self) -> dict:
        return {
            "rank": self.rank,
            "user_id": self.owner_id,
            "name": self.name,
            "profile_image": self.profile_image,
            "percentage_achieved": self.percentage_achieved,
            "latest_report_date": self.latest_report_date.isoformat() if self.latest_report_date else None,
        }

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserProfile:
    """Display data used to decorate leaderboard rows."""

    owner_id: str
    name: str
    profile_image: Optional[str] = None

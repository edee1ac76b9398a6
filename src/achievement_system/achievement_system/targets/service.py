from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.duration import duration_seconds
from ..core.exceptions import NotFound
from .model import TargetConfig
from .repository import TargetSource

logger = logging.getLogger(__name__)

_DEFAULTS = TargetConfig(owner_id="")


def _non_negative(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _created_at(doc: Mapping[str, Any]) -> datetime:
    value = doc.get("createdAt")
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            pass
    return datetime.min


class TargetResolver:
    """Resolve the authoritative TargetConfig for a user.

    Lookup tiers: employee id, then email, then role. Within a tier the most
    recently created document wins. With no document at all the hard-coded
    defaults apply; individual missing or invalid fields also fall back to
    their default one by one.
    """

    def __init__(self, targets: TargetSource, *, defaults: Optional[TargetConfig] = None):
        self._targets = targets
        self._defaults = defaults or _DEFAULTS

    async def _latest(self, **selector: str) -> Optional[Mapping[str, Any]]:
        docs: Sequence[Mapping[str, Any]] = await self._targets.find_targets(**selector)
        if not docs:
            return None
        return max(docs, key=_created_at)

    async def _find(self, owner_id: str, email: Optional[str], role: Optional[str]) -> Mapping[str, Any]:
        for selector in ({"employee_id": owner_id}, {"email": email}, {"role": role}):
            value = next(iter(selector.values()))
            if not value:
                continue
            doc = await self._latest(**selector)
            if doc is not None:
                return doc
        raise NotFound(f"No target config for {owner_id}")

    async def resolve_targets(self, owner_id: str, *, email: Optional[str] = None, role: Optional[str] = None) -> TargetConfig:
        try:
            doc = await self._find(owner_id, email, role)
        except NotFound:
            logger.info("No targets configured for user %s; using defaults", owner_id)
            return TargetConfig(
                owner_id=owner_id,
                num_meetings=self._defaults.num_meetings,
                attended_meetings=self._defaults.attended_meetings,
                duration_seconds=self._defaults.duration_seconds,
                closing_amount=self._defaults.closing_amount,
                is_default=True,
            )
        return self.from_document(owner_id, doc)

    def from_document(self, owner_id: str, doc: Mapping[str, Any]) -> TargetConfig:
        d = self._defaults

        attended = _non_negative(doc.get("attendedMeetings"))
        if attended is None:
            attended = _non_negative(doc.get("positiveLeads"))

        duration = _non_negative(doc.get("durationSeconds"))
        if duration is None:
            hours = _non_negative(doc.get("meetingDurationHours"))
            duration = hours * 3600 if hours is not None else None
        if duration is None and doc.get("meetingDuration") not in (None, ""):
            duration = float(duration_seconds(doc.get("meetingDuration"))) or None

        num_meetings = _non_negative(doc.get("numMeetings"))
        closing = _non_negative(doc.get("closingAmount"))

        created = _created_at(doc)
        return TargetConfig(
            owner_id=owner_id,
            num_meetings=num_meetings if num_meetings is not None else d.num_meetings,
            attended_meetings=attended if attended is not None else d.attended_meetings,
            duration_seconds=duration if duration is not None else d.duration_seconds,
            closing_amount=closing if closing is not None else d.closing_amount,
            created_at=created if created != datetime.min else None,
        )

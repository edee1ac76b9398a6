from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.duration import duration_seconds
from ..common.validators import non_negative_number
from ..core.enums import AttendanceStatus
from ..core.exceptions import ParseError

logger = logging.getLogger(__name__)


def _to_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        # epoch seconds, as exported by document stores
        return datetime.fromtimestamp(value).date()
    return parse_iso_date(str(value)[:10])


def _to_time(value: Any, *, field: str, owner_id: str) -> Optional[time]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.time().replace(second=0, microsecond=0)
    if isinstance(value, time):
        return value
    try:
        return parse_hhmm(str(value))
    except ParseError:
        logger.warning("Ignoring malformed %s %r for user %s", field, value, owner_id)
        return None


@dataclass(frozen=True)
class AttendanceRecord:
    """One user's punches for one calendar day.

    ``stored_status`` is whatever the store holds as a display value; the
    authoritative status is always recomputed from the punch times.
    """

    owner_id: str
    work_date: date
    punch_in: Optional[time] = None
    punch_out: Optional[time] = None
    stored_status: Optional[AttendanceStatus] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "AttendanceRecord":
        owner_id = str(doc.get("userId") or doc.get("owner_id") or "")
        stored = doc.get("status")
        try:
            stored_status = AttendanceStatus(stored) if stored else None
        except ValueError:
            stored_status = None
        return cls(
            owner_id=owner_id,
            work_date=_to_date(doc.get("date") or doc.get("work_date")),
            punch_in=_to_time(doc.get("punchIn"), field="punchIn", owner_id=owner_id),
            punch_out=_to_time(doc.get("punchOut"), field="punchOut", owner_id=owner_id),
            stored_status=stored_status,
        )


@dataclass(frozen=True)
class PerformanceRecord:
    """A submitted daily report. Several may exist per user per day."""

    owner_id: str
    report_date: Optional[date]
    meetings_held: float = 0
    meetings_attended: float = 0
    total_duration_seconds: int = 0
    total_closing_amount: float = 0
    percentage_achieved: Optional[float] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "PerformanceRecord":
        if "meetingDuration" in doc and doc.get("meetingDuration") not in (None, ""):
            seconds = duration_seconds(doc.get("meetingDuration"))
        else:
            seconds = int(non_negative_number(doc.get("totalDurationSeconds")))

        attended = doc.get("positiveLeads")
        if attended is None:
            attended = doc.get("attendedMeetings")

        pct = doc.get("percentageAchieved")
        return cls(
            owner_id=str(doc.get("userId") or doc.get("owner_id") or ""),
            report_date=_to_date(doc.get("date")),
            meetings_held=non_negative_number(doc.get("numMeetings")),
            meetings_attended=non_negative_number(attended),
            total_duration_seconds=seconds,
            total_closing_amount=non_negative_number(doc.get("totalClosingAmount")),
            percentage_achieved=non_negative_number(pct) if pct is not None else None,
        )

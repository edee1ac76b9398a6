from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Union

from ..core.exceptions import ParseError

_HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ParseError(f"Invalid date (YYYY-MM-DD): {value!r}")


def now_local() -> datetime:
    """Current local time in the organization's calendar.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_hhmm(value: str) -> time:
    """Parse a wall-clock "HH:MM" (optionally "HH:MM:SS") string.

    Raises ParseError instead of defaulting, deadlines must never silently
    collapse to midnight.
    """
    if not isinstance(value, str):
        raise ParseError(f"Invalid time (HH:MM): {value!r}")
    m = _HHMM_RE.match(value)
    if not m:
        raise ParseError(f"Invalid time (HH:MM): {value!r}")
    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3)) if m.group(3) else 0
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ParseError(f"Invalid time (HH:MM): {value!r}")
    return time(hour=hours, minute=minutes, second=seconds)


def minute_of_day(value: Union[str, time, datetime]) -> int:
    if isinstance(value, datetime):
        value = value.time()
    elif isinstance(value, str):
        value = parse_hhmm(value)
    return value.hour * 60 + value.minute

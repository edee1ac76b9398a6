"""Duration normalization.

Upstream durations are best-effort user entry: "1 hr 20 mins", "01:20:00",
or plain seconds. The parser tries each shape in order and tags the result
with the branch that matched, so "could not parse" is an explicit outcome
(seconds=0) rather than a regex that silently found nothing.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any

from ..core.enums import DurationFormat
from ..core.exceptions import ParseError

_NUMBER_RE = re.compile(r"^\s*\d+(?:\.\d+)?\s*$")
_HOURS_RE = re.compile(r"(\d+(?:\.\d+)?)\s*h(?:ours?|rs?)?(?![a-z])", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+)\s*m(?:in(?:ute)?s?)?(?![a-z])", re.IGNORECASE)
_SECONDS_RE = re.compile(r"(\d+)\s*s(?:ec(?:ond)?s?)?(?![a-z])", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedDuration:
    kind: DurationFormat
    seconds: int

    @property
    def ok(self) -> bool:
        return self.kind != DurationFormat.UNPARSEABLE


UNPARSEABLE = ParsedDuration(kind=DurationFormat.UNPARSEABLE, seconds=0)


def _parse_colon(text: str) -> ParsedDuration:
    parts = text.split(":")
    try:
        hours, minutes, seconds = (int(p) for p in parts)
    except ValueError:
        raise ParseError(f"Invalid duration (H:MM:SS): {text!r}")
    if hours < 0 or not (0 <= minutes < 60) or not (0 <= seconds < 60):
        raise ParseError(f"Invalid duration (H:MM:SS): {text!r}")
    return ParsedDuration(kind=DurationFormat.COLON, seconds=hours * 3600 + minutes * 60 + seconds)


def _parse_free_text(text: str) -> ParsedDuration:
    hours = _HOURS_RE.search(text)
    minutes = _MINUTES_RE.search(text)
    seconds = _SECONDS_RE.search(text)
    if not (hours or minutes or seconds):
        return UNPARSEABLE

    total = 0.0
    if hours:
        total += float(hours.group(1)) * 3600
    if minutes:
        total += float(minutes.group(1)) * 60
    if seconds:
        total += float(seconds.group(1))
    if not math.isfinite(total):
        return UNPARSEABLE
    return ParsedDuration(kind=DurationFormat.FREE_TEXT, seconds=int(round(total)))


def _numeric(value: float) -> ParsedDuration:
    # NaN, infinities and overlong digit strings carry no usable duration
    if isinstance(value, float) and not math.isfinite(value):
        return UNPARSEABLE
    return ParsedDuration(kind=DurationFormat.NUMERIC, seconds=max(int(value), 0))


def parse_duration(value: Any, *, strict: bool = False) -> ParsedDuration:
    """Parse ``value`` into a tagged duration.

    With ``strict=True`` a colon-shaped string whose parts are not a valid
    H:MM:SS raises ParseError; otherwise it is reported as UNPARSEABLE.
    """
    if value is None or isinstance(value, bool):
        return UNPARSEABLE

    if isinstance(value, (int, float)):
        return _numeric(value)

    text = str(value).strip()
    if not text:
        return UNPARSEABLE

    if text.count(":") == 2:
        try:
            return _parse_colon(text)
        except ParseError:
            if strict:
                raise
            return UNPARSEABLE

    if _NUMBER_RE.match(text):
        return _numeric(float(text))

    return _parse_free_text(text)


def duration_seconds(value: Any) -> int:
    """Lenient conversion used on stored report data: unparseable input is 0."""
    return parse_duration(value).seconds


def format_hours(seconds: int) -> str:
    minutes = max(int(seconds), 0) // 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"

"""Date-range utilities.

All bounds are inclusive on both ends and computed in the organization's
fixed local calendar. Deadlines are compared as minute-of-day integers, so
there is no DST handling.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from ..core.enums import PeriodKind
from .datetime_utils import minute_of_day


@dataclass(frozen=True)
class Window:
    """Inclusive [start, end] date range used to filter records.

    ``period`` is None for a custom range that is not a calendar week, month
    or quarter.
    """

    start: date
    end: date
    period: Optional[PeriodKind] = None

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1


def week_bounds(d: date, week_starts_on: int = 0) -> Window:
    """Week containing ``d``; ``week_starts_on`` uses date.weekday() numbering."""
    offset = (d.weekday() - week_starts_on) % 7
    start = d - timedelta(days=offset)
    return Window(start=start, end=start + timedelta(days=6), period=PeriodKind.WEEK)


def month_bounds(d: date) -> Window:
    last_day = calendar.monthrange(d.year, d.month)[1]
    return Window(start=d.replace(day=1), end=d.replace(day=last_day), period=PeriodKind.MONTH)


def quarter_bounds(d: date) -> Window:
    first_month = 3 * ((d.month - 1) // 3) + 1
    start = date(d.year, first_month, 1)
    end = month_bounds(date(d.year, first_month + 2, 1)).end
    return Window(start=start, end=end, period=PeriodKind.QUARTER)


def bounds_for(d: date, period: PeriodKind, week_starts_on: int = 0) -> Window:
    if period == PeriodKind.WEEK:
        return week_bounds(d, week_starts_on)
    if period == PeriodKind.MONTH:
        return month_bounds(d)
    return quarter_bounds(d)


def window_between(start: date, end: date, week_starts_on: int = 0) -> Window:
    """Window for an explicit range, tagged with its period when it is exactly one."""
    for period in (PeriodKind.WEEK, PeriodKind.MONTH, PeriodKind.QUARTER):
        named = bounds_for(start, period, week_starts_on)
        if (named.start, named.end) == (start, end):
            return named
    return Window(start=start, end=end)


def shift_months(d: date, months: int) -> date:
    """Move ``d`` by whole months, clamping the day to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def previous_week(window: Window) -> Window:
    return Window(
        start=window.start - timedelta(days=7),
        end=window.end - timedelta(days=7),
        period=PeriodKind.WEEK,
    )


def is_before_or_at(value: Union[str, time, datetime], deadline: Union[str, time]) -> bool:
    """True when ``value`` is not later than ``deadline`` at minute granularity."""
    return minute_of_day(value) <= minute_of_day(deadline)

"""
Calendar windows relative to "now".

All arithmetic is local wall-clock time on the datetime passed in; no
timezone normalization happens here. Weeks start on Monday (ISO weekday:
Monday = 1 ... Sunday = 7).

Windows:
    today      [midnight, next midnight)
    tomorrow   [today + 1d, today + 2d - 1ms]
    this_week  [Monday of this week, + 7d - 1ms]
    next_week  [Monday of next week, + 7d - 1ms]
    this_month [1st 00:00, last day 23:59:59]
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta

from sessionfilter.clock import to_local
from sessionfilter.model import DateWindow

ONE_DAY = timedelta(days=1)
ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True)
class DateRanges:
    now: datetime
    today: DateWindow
    tomorrow: DateWindow
    this_week: DateWindow
    next_week: DateWindow
    this_month: DateWindow


def _start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _week_from(monday: datetime) -> DateWindow:
    return DateWindow(monday, monday + 7 * ONE_DAY - ONE_MS, end_inclusive=True)


def compute_date_ranges(now: datetime) -> DateRanges:
    """
    Derive every named window from a single ``now`` snapshot.
    An aware ``now`` is converted to local wall-clock time first.
    """
    now = to_local(now)
    start_of_today = _start_of_day(now)
    iso_day = now.isoweekday()

    today = DateWindow(start_of_today, start_of_today + ONE_DAY, end_inclusive=False)

    start_of_tomorrow = start_of_today + ONE_DAY
    tomorrow = DateWindow(start_of_tomorrow, start_of_tomorrow + ONE_DAY - ONE_MS, end_inclusive=True)

    this_week = _week_from(start_of_today - (iso_day - 1) * ONE_DAY)
    next_week = _week_from(start_of_today + (8 - iso_day) * ONE_DAY)

    last_day = calendar.monthrange(now.year, now.month)[1]
    this_month = DateWindow(
        start_of_today.replace(day=1),
        start_of_today.replace(day=last_day, hour=23, minute=59, second=59),
        end_inclusive=True,
    )

    return DateRanges(
        now=now,
        today=today,
        tomorrow=tomorrow,
        this_week=this_week,
        next_week=next_week,
        this_month=this_month,
    )

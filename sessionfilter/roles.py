"""
Per-role filter tables.

Teachers and students see the same kind of session list, but the filter
menus differ and so do some edge rules:

    selection   teacher                         student
    today       [start, end)                    [start, end]
    tomorrow    [start, end)                    [start, end]
    nextWeek    [start, end]                    -
    week        -                               [start, end]
    month       -                               [start, end]
    past        date_end <= now                 date_end < now

The student's closed "today" edge lands on the next midnight, so a session
starting exactly at midnight shows up under both "today" and "tomorrow" for
students but only under "tomorrow" for teachers. Kept as is.

Both engines (query.py, filtering.py) read these tables; nothing else knows
which role it is running for.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

PAST = "past"

TEACHER_FILTERS: Tuple[str, ...] = ("today", "tomorrow", "nextWeek", "past", "all_date", "all_text")
STUDENT_FILTERS: Tuple[str, ...] = ("all", "today", "tomorrow", "week", "month", "past")


@dataclass(frozen=True)
class Bucket:
    """A date bucket: which DateRanges window it uses and how its end edge behaves."""

    window: str
    end_inclusive: bool


@dataclass(frozen=True)
class RoleRules:
    name: str
    filters: Tuple[str, ...]
    buckets: Mapping[str, Bucket]
    # "past" compares date_end against now; inclusive means date_end == now counts
    past_inclusive: bool
    # order of the client-side pipeline: search before the date bucket or after it
    search_first: bool

    def bucket_for(self, selection: str) -> Bucket | None:
        return self.buckets.get(selection)


TEACHER = RoleRules(
    name="teacher",
    filters=TEACHER_FILTERS,
    buckets=MappingProxyType(
        {
            "today": Bucket("today", end_inclusive=False),
            "tomorrow": Bucket("tomorrow", end_inclusive=False),
            "nextWeek": Bucket("next_week", end_inclusive=True),
        }
    ),
    past_inclusive=True,
    search_first=False,
)

STUDENT = RoleRules(
    name="student",
    filters=STUDENT_FILTERS,
    buckets=MappingProxyType(
        {
            "today": Bucket("today", end_inclusive=True),
            "tomorrow": Bucket("tomorrow", end_inclusive=True),
            "week": Bucket("this_week", end_inclusive=True),
            "month": Bucket("this_month", end_inclusive=True),
        }
    ),
    past_inclusive=False,
    search_first=True,
)

ROLES: Mapping[str, RoleRules] = MappingProxyType({TEACHER.name: TEACHER, STUDENT.name: STUDENT})

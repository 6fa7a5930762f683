"""
Server-side query construction.

Turns a role's filter selection plus a search term into a
ServerQueryDescriptor for the session list endpoint. No I/O happens here.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple

from sessionfilter.clock import SYSTEM_CLOCK, Clock
from sessionfilter.date_ranges import DateRanges, compute_date_ranges
from sessionfilter.model import ServerQueryDescriptor, SessionFilters
from sessionfilter.roles import PAST, STUDENT, TEACHER, RoleRules

logger = logging.getLogger(__name__)


def _date_bounds(
    rules: RoleRules, selection: str, ranges: DateRanges
) -> Tuple[Optional[datetime], Optional[datetime]]:
    if selection == PAST:
        return None, ranges.now

    bucket = rules.bucket_for(selection)
    if bucket is None:
        # "all" and its aliases, or anything unknown: no date constraint
        return None, None

    window = getattr(ranges, bucket.window)
    return window.start, window.end


def build_sessions_query(
    rules: RoleRules, selection: str, search: Optional[str], clock: Clock = SYSTEM_CLOCK
) -> ServerQueryDescriptor:
    """
    Build the list query for one role.

    The search term is trimmed and only sent when non-empty. ``filters`` is
    None when neither a search nor a date bound applies.
    """
    ranges = compute_date_ranges(clock.now())

    term = (search or "").strip()
    date_start, date_end = _date_bounds(rules, selection, ranges)

    filters: Optional[SessionFilters] = None
    if term or date_start is not None or date_end is not None:
        filters = SessionFilters(search=term or None, date_start=date_start, date_end=date_end)

    logger.debug("%s query: selection=%r search=%r filters=%r", rules.name, selection, term, filters)
    return ServerQueryDescriptor(page_number=1, page_size=None, filters=filters)


def build_teacher_query(
    selection: str, search: Optional[str], clock: Clock = SYSTEM_CLOCK
) -> ServerQueryDescriptor:
    return build_sessions_query(TEACHER, selection, search, clock)


def build_student_query(
    selection: str, search: Optional[str], clock: Clock = SYSTEM_CLOCK
) -> ServerQueryDescriptor:
    return build_sessions_query(STUDENT, selection, search, clock)

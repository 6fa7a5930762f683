"""
Client-side filtering of an already-fetched session list.

Pipeline (one clock read per call):
1. compute the date windows
2. date bucket + search predicates, in the role's order
3. sort by date_start: ascending, or descending for "past"

The input list is never modified; a new list is returned.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from sessionfilter.clock import SYSTEM_CLOCK, Clock, to_local
from sessionfilter.date_ranges import DateRanges, compute_date_ranges
from sessionfilter.model import Session
from sessionfilter.roles import PAST, STUDENT, TEACHER, RoleRules

logger = logging.getLogger(__name__)

Predicate = Callable[[Session], bool]

EPOCH = datetime.fromtimestamp(0)


def matches_search(session: Session, term: str) -> bool:
    """
    Case-insensitive substring match on course, group or location name.
    Missing fields never match.
    """
    needle = term.lower()
    for value in (session.course_name, session.course_group_name, session.location_name):
        if value and needle in value.lower():
            return True
    return False


def _date_predicate(rules: RoleRules, selection: str, ranges: DateRanges) -> Optional[Predicate]:
    """
    Return the bucket predicate for ``selection``, or None when the selection
    puts no constraint on dates.
    """
    now = ranges.now

    if selection == PAST:
        inclusive = rules.past_inclusive

        def ended(s: Session) -> bool:
            end = to_local(s.date_end)
            if end is None:
                return False
            return end <= now if inclusive else end < now

        return ended

    bucket = rules.bucket_for(selection)
    if bucket is None:
        return None

    window = getattr(ranges, bucket.window)

    def in_bucket(s: Session) -> bool:
        start = to_local(s.date_start)
        if start is None:
            return False
        return window.contains(start, end_inclusive=bucket.end_inclusive)

    return in_bucket


def _sort_key(session: Session) -> datetime:
    # sessions without a start sort as the epoch, i.e. first
    start = to_local(session.date_start)
    return EPOCH if start is None else start


def filter_sessions(
    rules: RoleRules,
    sessions: Iterable[Session],
    selection: str,
    search: Optional[str],
    clock: Clock = SYSTEM_CLOCK,
) -> List[Session]:
    ranges = compute_date_ranges(clock.now())
    result = list(sessions)

    steps: List[Predicate] = []
    date_ok = _date_predicate(rules, selection, ranges)
    if date_ok is not None:
        steps.append(date_ok)

    # the trimmed term decides whether to search; matching uses the term as typed
    if search and search.strip():
        search_ok: Predicate = lambda s: matches_search(s, search)
        if rules.search_first:
            steps.insert(0, search_ok)
        else:
            steps.append(search_ok)

    for step in steps:
        result = [s for s in result if step(s)]

    result.sort(key=_sort_key, reverse=selection == PAST)

    logger.debug(
        "%s filter: selection=%r search=%r -> %d session(s)", rules.name, selection, search, len(result)
    )
    return result


def filter_teacher_sessions(
    sessions: Iterable[Session], selection: str, search: Optional[str], clock: Clock = SYSTEM_CLOCK
) -> List[Session]:
    return filter_sessions(TEACHER, sessions, selection, search, clock)


def filter_student_sessions(
    sessions: Iterable[Session], selection: str, search: Optional[str], clock: Clock = SYSTEM_CLOCK
) -> List[Session]:
    return filter_sessions(STUDENT, sessions, selection, search, clock)

"""
Active / past classification of a single session, used for status badges.

These rules are for display only; the list filters have their own edge rules
per role (see roles.py).
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sessionfilter.clock import SYSTEM_CLOCK, Clock, to_local
from sessionfilter.model import Session

STATUS_ACTIVE = "active"
STATUS_PAST = "past"
STATUS_UPCOMING = "upcoming"


def is_active(start: Optional[datetime], end: Optional[datetime], now: datetime) -> bool:
    """
    True while ``now`` lies within [start, end], both edges included.
    A session with a missing bound is never active.
    """
    start, end, now = to_local(start), to_local(end), to_local(now)
    if start is None or end is None:
        return False
    return start <= now <= end


def is_past(end: Optional[datetime], now: datetime) -> bool:
    """
    True once the session has ended strictly before ``now``.
    A session without an end is never past.
    """
    end, now = to_local(end), to_local(now)
    if end is None:
        return False
    return end < now


def is_session_active(
    date_start: Optional[datetime], date_end: Optional[datetime], clock: Clock = SYSTEM_CLOCK
) -> bool:
    """Same as ``is_active`` with "now" taken from ``clock``."""
    return is_active(date_start, date_end, clock.now())


def is_session_past(date_end: Optional[datetime], clock: Clock = SYSTEM_CLOCK) -> bool:
    """Same as ``is_past`` with "now" taken from ``clock``."""
    return is_past(date_end, clock.now())


def session_status(session: Session, now: datetime) -> str:
    """
    Badge for one session: active wins over past; anything else is upcoming
    (including sessions without dates).
    """
    if is_active(session.date_start, session.date_end, now):
        return STATUS_ACTIVE
    if is_past(session.date_end, now):
        return STATUS_PAST
    return STATUS_UPCOMING

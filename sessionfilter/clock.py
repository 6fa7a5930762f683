"""
Clock capability.

Every filter and query call reads "now" exactly once from a Clock, so all
windows of one result share the same instant and tests can pin time.

All comparisons in the package happen on naive local wall-clock datetimes;
``to_local`` brings timezone-aware instants into that form.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


def to_local(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Convert an aware datetime to the host's local time without tzinfo.
    Naive datetimes are already local and are returned unchanged.
    """
    if dt is None or dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant."""


class SystemClock(Clock):
    """Local wall-clock time (naive datetime)."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Always returns the same instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


SYSTEM_CLOCK = SystemClock()

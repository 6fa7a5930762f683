"""
Central data model definitions used across the project.

This module defines the canonical structure of sessions, date windows and
server query descriptors so that:
- the filter engine, the query builder and the CLI share the same field names
- every value is immutable once created (safe to share between calls)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from sessionfilter.config import UNPAGED_PAGE_SIZE


@dataclass(frozen=True)
class Session:
    """
    One course session as returned by the backend list endpoint.

    Only the fields the filters look at are typed; everything else the
    backend sends is kept in ``extra`` for display.
    """

    session_id: Optional[str] = None
    course_name: Optional[str] = None
    course_group_name: Optional[str] = None
    location_name: Optional[str] = None
    date_start: Optional[datetime] = None
    date_end: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class DateWindow:
    """
    Instant interval. ``start`` is always inclusive, ``end`` depends on
    ``end_inclusive``.
    """

    start: datetime
    end: datetime
    end_inclusive: bool = True

    def contains(self, instant: datetime, end_inclusive: Optional[bool] = None) -> bool:
        """
        Test membership. ``end_inclusive`` overrides the window's own end edge,
        which lets a caller apply its own edge rule to a shared window.
        """
        inclusive = self.end_inclusive if end_inclusive is None else end_inclusive
        if instant < self.start:
            return False
        return instant <= self.end if inclusive else instant < self.end


@dataclass(frozen=True)
class SessionFilters:
    search: Optional[str] = None
    date_start: Optional[datetime] = None
    date_end: Optional[datetime] = None

    def to_params(self) -> Dict[str, Any]:
        # keys that are not set are left out, matching the backend's optional fields
        out: Dict[str, Any] = {}
        if self.search is not None:
            out["search"] = self.search
        if self.date_start is not None:
            out["dateStart"] = self.date_start.isoformat()
        if self.date_end is not None:
            out["dateEnd"] = self.date_end.isoformat()
        return out


@dataclass(frozen=True)
class ServerQueryDescriptor:
    """
    Plain description of a session list request (pagination + filters).

    ``page_size=None`` is the unpaged mode: the caller wants every matching
    session. It only becomes a number in ``to_params``.
    ``filters=None`` means "no filters object", which the backend does not
    treat the same as an empty one.
    """

    page_number: int = 1
    page_size: Optional[int] = None
    filters: Optional[SessionFilters] = None

    @property
    def unpaged(self) -> bool:
        return self.page_size is None

    def to_params(self) -> Dict[str, Any]:
        """
        Render the descriptor as the backend's paged-list parameters.
        """
        params: Dict[str, Any] = {
            "pageNumber": self.page_number,
            "pageSize": UNPAGED_PAGE_SIZE if self.page_size is None else self.page_size,
        }
        if self.filters is not None:
            params["filters"] = self.filters.to_params()
        return params

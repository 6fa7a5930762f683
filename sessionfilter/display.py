"""
Short date/time strings for session listings.

Formats follow the institution's locale: '10.06, 09:00', '10.06.2024',
'09:00'. A missing instant renders as '-'.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

MISSING = "-"


def format_date_time(dt: Optional[datetime]) -> str:
    """Day, month and time, e.g. 05.06, 09:07."""
    if dt is None:
        return MISSING
    return dt.strftime("%d.%m, %H:%M")


def format_date_only(dt: Optional[datetime]) -> str:
    """Full date, e.g. 05.06.2024."""
    if dt is None:
        return MISSING
    return dt.strftime("%d.%m.%Y")


def format_time_only(dt: Optional[datetime]) -> str:
    """Time of day, e.g. 09:07."""
    if dt is None:
        return MISSING
    return dt.strftime("%H:%M")

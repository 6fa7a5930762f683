"""
Session list filtering for teachers and students.
"""

from sessionfilter.classify import is_session_active, is_session_past
from sessionfilter.clock import Clock, FixedClock, SystemClock
from sessionfilter.filtering import filter_student_sessions, filter_teacher_sessions
from sessionfilter.model import DateWindow, ServerQueryDescriptor, Session, SessionFilters
from sessionfilter.query import build_student_query, build_teacher_query

__all__ = [
    "Clock",
    "DateWindow",
    "FixedClock",
    "ServerQueryDescriptor",
    "Session",
    "SessionFilters",
    "SystemClock",
    "build_student_query",
    "build_teacher_query",
    "filter_student_sessions",
    "filter_teacher_sessions",
    "is_session_active",
    "is_session_past",
]

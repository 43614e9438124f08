"""
Tutor lesson dashboard.

Lists lessons, sorts them into Today, Available, Upcoming and Historic
buckets, filters them by month window or date range, and lets a tutor
claim available lessons.

Usage:
    >>> from lesson_dashboard import DashboardView, LessonStore, MockLessonService
    >>>
    >>> store = LessonStore(MockLessonService())
    >>> view = DashboardView(store)
    >>> await view.refresh()
    >>> buckets = view.buckets()
"""

from .auth import AuthSession
from .dashboard.filters import filter_lessons
from .dashboard.month_window import available_slots, resolve_window_slot
from .dashboard.view import DashboardBuckets, DashboardView, Notification
from .errors import (
    ClaimInProgressError,
    LessonDashboardError,
    NetworkFailureError,
    NotFoundOrUnavailableError,
    ParseFailureError,
    ServiceTimeoutError,
)
from .models import DateRange, FilterSelection, Lesson, LessonStatus, LessonType, TODAY, User
from .services import HttpLessonService, LessonService, MockLessonService
from .store import LessonStore, LoadingState

__all__ = [
    "AuthSession",
    "filter_lessons",
    "available_slots",
    "resolve_window_slot",
    "DashboardBuckets",
    "DashboardView",
    "Notification",
    "ClaimInProgressError",
    "LessonDashboardError",
    "NetworkFailureError",
    "NotFoundOrUnavailableError",
    "ParseFailureError",
    "ServiceTimeoutError",
    "DateRange",
    "FilterSelection",
    "Lesson",
    "LessonStatus",
    "LessonType",
    "TODAY",
    "User",
    "HttpLessonService",
    "LessonService",
    "MockLessonService",
    "LessonStore",
    "LoadingState",
]

__version__ = "0.1.0"

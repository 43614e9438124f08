"""
Error taxonomy for the lesson dashboard.

Every failure raised by the store or the lesson services derives from
LessonDashboardError so callers can catch the whole family at the UI
boundary while still telling the kinds apart.
"""

from typing import List, Optional


class LessonDashboardError(Exception):
    """Base class for all lesson dashboard failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundOrUnavailableError(LessonDashboardError):
    """Raised when a claimed lesson does not exist or is not Available."""

    def __init__(
        self,
        lesson_id: str,
        message: str = "Lesson not found or not available"
    ):
        super().__init__(message)
        self.lesson_id = lesson_id


class ClaimInProgressError(LessonDashboardError):
    """Raised when a claim on the same lesson is already in flight."""

    def __init__(self, lesson_id: str):
        super().__init__(f"A claim for lesson {lesson_id} is already in progress")
        self.lesson_id = lesson_id


class NetworkFailureError(LessonDashboardError):
    """Non-2xx response or transport error from a lesson service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ServiceTimeoutError(LessonDashboardError):
    """A lesson service call exceeded its timeout budget."""

    def __init__(self, message: str, timeout: Optional[float] = None):
        super().__init__(message)
        self.timeout = timeout


class ParseFailureError(LessonDashboardError):
    """A lesson service returned a malformed response."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []

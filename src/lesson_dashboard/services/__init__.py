"""
Lesson services.

Usage:
    >>> from lesson_dashboard.services import HttpLessonService, MockLessonService
    >>> service = MockLessonService()
    >>> lessons = await service.fetch_lessons()
"""

from .http_service import HttpLessonService
from .interfaces import DEFAULT_TIMEOUT, LessonService, bounded
from .mock_service import MockLessonService, build_demo_lessons
from .parsing import parse_lesson_records

__all__ = [
    "DEFAULT_TIMEOUT",
    "HttpLessonService",
    "LessonService",
    "MockLessonService",
    "bounded",
    "build_demo_lessons",
    "parse_lesson_records",
]

"""
Shared fixtures for lesson dashboard tests.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import pytest

from lesson_dashboard.auth import AuthSession
from lesson_dashboard.models.lesson import (
    EXPECTED_STATUS,
    Lesson,
    LessonType,
    User,
)
from lesson_dashboard.services.interfaces import LessonService
from lesson_dashboard.store.lesson_store import LessonStore


# Monday 10 November 2025, noon UTC
NOW = datetime(2025, 11, 10, 12, 0, tzinfo=timezone.utc)


def make_lesson(
    lesson_id: str,
    date: datetime,
    lesson_type: LessonType = LessonType.AVAILABLE,
    **overrides: Any
) -> Lesson:
    """Build a lesson that honours the type/status contract unless overridden."""
    available = lesson_type == LessonType.AVAILABLE
    fields = {
        "id": lesson_id,
        "date": date,
        "type": lesson_type,
        "subject": f"Subject {lesson_id}",
        "students": () if available else ("Emma", "Noah"),
        "tutor": None if available else "Sarah Tan",
        "status": EXPECTED_STATUS[lesson_type],
    }
    fields.update(overrides)
    return Lesson(**fields)


class FakeLessonService(LessonService):
    """Lesson service double that records calls."""

    def __init__(self, lessons: Optional[List[Lesson]] = None):
        self.lessons = list(lessons or [])
        self.claim_response: Dict[str, Any] = {}
        self.fetch_error: Optional[Exception] = None
        self.claim_error: Optional[Exception] = None
        self.claim_gate: Optional[asyncio.Event] = None
        self.fetch_calls = 0
        self.claim_calls: List[str] = []

    async def fetch_lessons(self) -> List[Lesson]:
        self.fetch_calls += 1
        if self.fetch_error is not None:
            raise self.fetch_error
        return list(self.lessons)

    async def claim_lesson(self, lesson_id: str) -> Dict[str, Any]:
        self.claim_calls.append(lesson_id)
        if self.claim_gate is not None:
            await self.claim_gate.wait()
        if self.claim_error is not None:
            raise self.claim_error
        return dict(self.claim_response)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time."""
    return NOW


@pytest.fixture
def lesson_factory():
    """Factory building contract-honouring lessons (see make_lesson)."""
    return make_lesson


@pytest.fixture
def sample_lessons() -> List[Lesson]:
    """One lesson of each kind around NOW, in a deliberately unsorted order."""
    return [
        make_lesson("L004", NOW + timedelta(days=3), LessonType.UPCOMING),
        make_lesson("L001", NOW - timedelta(days=20), LessonType.HISTORIC),
        make_lesson("L007", NOW - timedelta(hours=2), LessonType.AVAILABLE),
        make_lesson("L005", NOW - timedelta(hours=1), LessonType.UPCOMING),
        make_lesson("L008", NOW + timedelta(days=40), LessonType.AVAILABLE),
        make_lesson("L002", NOW - timedelta(days=45), LessonType.HISTORIC),
    ]


@pytest.fixture
def fake_service(sample_lessons) -> FakeLessonService:
    """Fake service seeded with sample_lessons."""
    return FakeLessonService(sample_lessons)


@pytest.fixture
def auth() -> AuthSession:
    """Session with Sarah Tan logged in."""
    session = AuthSession()
    session.mark_logged_in(User(id="sarah", name="Sarah Tan", email="sarah@example.com"))
    return session


@pytest.fixture
def store(fake_service, auth) -> LessonStore:
    """Store over the fake service, not yet fetched."""
    return LessonStore(fake_service, auth)

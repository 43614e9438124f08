"""
In-memory lesson service for development and demos.

Used when no lessons API is configured. The seeded catalogue is laid out
relative to the current day so every dashboard bucket has something in it.
"""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from ..errors import NetworkFailureError
from ..models.lesson import EXPECTED_STATUS, Lesson, LessonStatus, LessonType
from ..utils.dates import local_now, start_of_day
from .interfaces import DEFAULT_TIMEOUT, LessonService, bounded


logger = logging.getLogger(__name__)


DEFAULT_TUTOR = "Sarah Tan"

# (id, day offset, hour, type, subject, students)
_CATALOGUE = [
    ("L001", -19, 14, LessonType.HISTORIC, "Minecraft Game Design - Level 1", ["Ethan", "Ava"]),
    ("L002", -14, 9, LessonType.HISTORIC, "Roblox Coding Basics", ["Lucas"]),
    ("L003", -11, 16, LessonType.HISTORIC, "Python for Kids - Introduction", ["Chloe", "Aaron"]),
    ("L004", 0, 10, LessonType.UPCOMING, "Minecraft Redstone Logic", ["Emma", "Noah"]),
    ("L005", 1, 15, LessonType.UPCOMING, "Roblox Game Design - Level 2", ["Ryan", "Mia"]),
    ("L006", 2, 12, LessonType.UPCOMING, "Website Design for Beginners", ["Olivia"]),
    ("L007", 0, 17, LessonType.AVAILABLE, "Python for Kids - Game Projects", []),
    ("L008", 5, 17, LessonType.AVAILABLE, "Roblox Game Design - Level 1", []),
    ("L009", 6, 10, LessonType.AVAILABLE, "Minecraft AI Coding Adventure", []),
    ("L010", 7, 9, LessonType.UPCOMING, "Python Automation for Kids", ["Elijah"]),
    ("L011", 60, 9, LessonType.UPCOMING, "Python Automation for Kids 2", ["Celtic"]),
]


def build_demo_lessons(
    now: Optional[datetime] = None,
    tutor_name: str = DEFAULT_TUTOR
) -> List[Lesson]:
    """
    Build the demo catalogue around ``now``.

    Args:
        now: Reference time (defaults to the current local time)
        tutor_name: Tutor assigned to historic and upcoming lessons

    Returns:
        Lessons in catalogue order
    """
    midnight = start_of_day(now or local_now())
    lessons = []

    for lesson_id, days, hour, lesson_type, subject, students in _CATALOGUE:
        available = lesson_type == LessonType.AVAILABLE
        status = EXPECTED_STATUS[lesson_type]

        lessons.append(Lesson(
            id=lesson_id,
            date=midnight + timedelta(days=days, hours=hour),
            type=lesson_type,
            subject=subject,
            students=tuple(students),
            tutor=None if available else tutor_name,
            status=status,
        ))

    return lessons


class MockLessonService(LessonService):
    """
    Lesson service holding its lessons in memory.

    Claims are remembered, so a later fetch returns the claimed lesson as
    Upcoming.

    Examples:
        >>> service = MockLessonService(delay=0)
        >>> lessons = await service.fetch_lessons()
        >>> record = await service.claim_lesson("L007")
        >>> record["type"]
        'Upcoming'
    """

    FETCH_DELAY = 0.5  # seconds
    CLAIM_DELAY = 0.3  # seconds

    def __init__(
        self,
        lessons: Optional[Iterable[Lesson]] = None,
        delay: Optional[float] = None,
        timeout: float = DEFAULT_TIMEOUT,
        tutor_name: str = DEFAULT_TUTOR
    ):
        """
        Initialize MockLessonService.

        Args:
            lessons: Initial lessons (demo catalogue by default)
            delay: Simulated latency in seconds for every call
                (defaults to FETCH_DELAY / CLAIM_DELAY)
            timeout: Timeout budget per call in seconds
            tutor_name: Tutor recorded on claimed lessons
        """
        if lessons is None:
            lessons = build_demo_lessons(tutor_name=tutor_name)

        self._lessons: Dict[str, Lesson] = {lesson.id: lesson for lesson in lessons}
        self.delay = delay
        self.timeout = timeout
        self.tutor_name = tutor_name
        self.fetch_calls = 0
        self.claim_calls: List[str] = []

        logger.info(f"MockLessonService initialized with {len(self._lessons)} lessons")

    async def _simulate_latency(self, default: float):
        await asyncio.sleep(default if self.delay is None else self.delay)

    async def _fetch(self) -> List[Lesson]:
        await self._simulate_latency(self.FETCH_DELAY)
        return list(self._lessons.values())

    async def _claim(self, lesson_id: str) -> Dict[str, Any]:
        await self._simulate_latency(self.CLAIM_DELAY)

        lesson = self._lessons.get(lesson_id)
        if lesson is None:
            raise NetworkFailureError(
                f"Taking class {lesson_id} failed: 404 Lesson not found",
                status_code=404
            )

        if not lesson.is_available:
            return lesson.to_dict()

        claimed = lesson.with_changes(
            type=LessonType.UPCOMING,
            status=LessonStatus.CONFIRMED,
            tutor=lesson.tutor or self.tutor_name,
        )
        self._lessons[lesson_id] = claimed
        return claimed.to_dict()

    async def fetch_lessons(self) -> List[Lesson]:
        """Return every lesson after the simulated delay."""
        self.fetch_calls += 1
        return await bounded(self._fetch(), self.timeout, "Fetching lessons")

    async def claim_lesson(self, lesson_id: str) -> Dict[str, Any]:
        """
        Claim a lesson.

        Raises:
            NetworkFailureError: 404 if the lesson does not exist
            ServiceTimeoutError: If the simulated delay exceeds the timeout
        """
        self.claim_calls.append(lesson_id)
        return await bounded(
            self._claim(lesson_id),
            self.timeout,
            f"Taking class {lesson_id}"
        )

"""
Lesson store.

The store is the single owner of the lesson collection. Reads hand out
snapshots; writes go through ``replace`` (whole collection, on fetch) and
``patch_one`` (one lesson, on claim).
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from ..auth import UNKNOWN_TUTOR, AuthSession
from ..dashboard.filters import filter_lessons
from ..errors import (
    ClaimInProgressError,
    LessonDashboardError,
    NotFoundOrUnavailableError,
    ParseFailureError,
)
from ..models.filter_selection import DateRange
from ..models.lesson import Lesson, LessonFilterType, LessonStatus, LessonType
from ..models.result import Result
from ..services.interfaces import LessonService


logger = logging.getLogger(__name__)


class LoadingState(Enum):
    """Fetch progress of the store."""
    IDLE = "idle"
    FETCHING = "fetching"


class LessonStore:
    """
    Holds the lesson collection and runs fetches and claims against a
    lesson service.

    Fetch failures are kept in ``error`` for display; claim failures are
    raised to the caller. A failure never modifies the collection.

    Examples:
        >>> store = LessonStore(MockLessonService(), auth)
        >>> result = await store.fetch_all()
        >>> available = store.derive("Available")
        >>> claimed = await store.claim(available[0].id)
        >>> claimed.type
        <LessonType.UPCOMING: 'Upcoming'>
    """

    def __init__(self, service: LessonService, auth: Optional[AuthSession] = None):
        """
        Initialize LessonStore.

        Args:
            service: Lesson service to fetch from and claim against
            auth: Session providing the current tutor's name for claims
        """
        self.service = service
        self.auth = auth
        self._lessons: List[Lesson] = []
        self._loading = LoadingState.IDLE
        self._error: Optional[str] = None
        self._claims_in_flight: Set[str] = set()

    @property
    def lessons(self) -> List[Lesson]:
        """Snapshot of the collection in source order."""
        return list(self._lessons)

    @property
    def loading(self) -> LoadingState:
        return self._loading

    @property
    def is_loading(self) -> bool:
        return self._loading == LoadingState.FETCHING

    @property
    def error(self) -> Optional[str]:
        """Message of the last failed fetch, cleared when a fetch starts."""
        return self._error

    @property
    def claims_in_flight(self) -> Set[str]:
        """IDs of lessons with a claim currently running."""
        return set(self._claims_in_flight)

    def get(self, lesson_id: str) -> Optional[Lesson]:
        """Get a lesson by id."""
        for lesson in self._lessons:
            if lesson.id == lesson_id:
                return lesson
        return None

    def replace(self, lessons: Iterable[Lesson]):
        """Replace the whole collection."""
        self._lessons = list(lessons)

    def patch_one(self, lesson: Lesson) -> bool:
        """
        Replace the lesson with the same id, keeping its position.

        Returns:
            True if a lesson was replaced, False if the id is not in the collection
        """
        for index, existing in enumerate(self._lessons):
            if existing.id == lesson.id:
                self._lessons[index] = lesson
                return True
        return False

    async def fetch_all(self) -> Result[List[Lesson]]:
        """
        Load every lesson from the service, replacing the collection.

        On failure the message is stored in ``error`` and the previous
        collection is kept. There is no retry.

        Returns:
            Result with the fetched lessons, or the failure
        """
        self._loading = LoadingState.FETCHING
        self._error = None
        logger.info("Fetching lessons")

        try:
            lessons = await self.service.fetch_lessons()
        except LessonDashboardError as e:
            self._error = e.message or "Failed to fetch lessons data"
            logger.error(f"Failed to fetch lessons: {self._error}")
            return Result.from_error(e)
        finally:
            self._loading = LoadingState.IDLE

        self.replace(lessons)
        logger.info(f"Loaded {len(lessons)} lessons")
        return Result.success(self.lessons, f"Loaded {len(lessons)} lessons")

    async def claim(self, lesson_id: str) -> Lesson:
        """
        Claim an available lesson for the current tutor.

        The service is only contacted when the lesson exists, is Available
        and has no other claim running. Its response is merged over the
        local lesson (see ``merge_claim``) and patched into the collection.

        Args:
            lesson_id: ID of the lesson to claim

        Returns:
            The lesson in its claimed state

        Raises:
            ClaimInProgressError: If a claim on the same lesson is running
            NotFoundOrUnavailableError: If the lesson is missing or not Available
            NetworkFailureError, ServiceTimeoutError, ParseFailureError:
                From the service, unchanged
        """
        if lesson_id in self._claims_in_flight:
            raise ClaimInProgressError(lesson_id)

        lesson = self.get(lesson_id)
        if lesson is None or not lesson.is_available:
            logger.warning(f"Claim rejected for lesson {lesson_id}: not found or not available")
            raise NotFoundOrUnavailableError(lesson_id)

        self._claims_in_flight.add(lesson_id)
        try:
            logger.info(f"Claiming lesson {lesson_id}")
            response = await self.service.claim_lesson(lesson_id)
            claimed = self.merge_claim(lesson, response)
        finally:
            self._claims_in_flight.discard(lesson_id)

        if not self.patch_one(claimed):
            logger.warning(
                f"Lesson {lesson_id} left the collection while being claimed; "
                f"claimed state not stored"
            )
        else:
            logger.info(f"Lesson {lesson_id} claimed by {claimed.tutor}")

        return claimed

    def merge_claim(self, lesson: Lesson, response: Mapping[str, Any]) -> Lesson:
        """
        Combine the pre-claim lesson with a (possibly partial) claim response.

        Non-null response fields win. When the response leaves them out,
        type becomes Upcoming, status Confirmed, tutor the current user's
        name, and students stays the pre-claim list.

        Raises:
            ParseFailureError: If the merged record is not a valid lesson
        """
        present: Dict[str, Any] = {
            key: value for key, value in (response or {}).items() if value is not None
        }

        record = lesson.to_dict()
        record.update(present)
        record["id"] = lesson.id
        record["type"] = present.get("type") or LessonType.UPCOMING.value
        record["status"] = present.get("status") or LessonStatus.CONFIRMED.value
        record["tutor"] = present.get("tutor") or self._current_tutor()
        record["students"] = present.get("students", list(lesson.students))

        try:
            return Lesson.from_dict(record)
        except (KeyError, TypeError, ValueError) as e:
            raise ParseFailureError(
                f"Claim response for lesson {lesson.id} is malformed: {e}"
            ) from e

    def _current_tutor(self) -> str:
        if self.auth is None:
            return UNKNOWN_TUTOR
        return self.auth.display_name

    def derive(
        self,
        type_or_today: Optional[LessonFilterType] = None,
        date_range: Optional[DateRange] = None,
        now: Optional[datetime] = None
    ) -> List[Lesson]:
        """
        Filter the current collection (see ``filter_lessons``).

        Pure read; the collection is not touched.
        """
        return filter_lessons(self._lessons, type_or_today, date_range, now)

"""
Dashboard view-model.

Holds the filter selection and turns the store's collection into the four
display buckets: Today, Available, Upcoming and Historic. Rendering is
left to the caller.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional

from ..errors import LessonDashboardError
from ..models.filter_selection import DateRange, FilterSelection, SelectionKind
from ..models.lesson import TODAY, Lesson, LessonFilterType, LessonType
from ..models.result import Result
from ..store.lesson_store import LessonStore
from .filters import filter_by_date_range
from .month_window import (
    CLEAR_MONTH_INDEX,
    MonthSlot,
    available_slots,
    resolve_window_slot,
    window_slots,
)


logger = logging.getLogger(__name__)


@dataclass
class DashboardBuckets:
    """Lessons grouped for display, each list in source order."""

    today: List[Lesson] = field(default_factory=list)
    available: List[Lesson] = field(default_factory=list)
    upcoming: List[Lesson] = field(default_factory=list)
    historic: List[Lesson] = field(default_factory=list)

    def as_dict(self) -> Dict[str, List[Lesson]]:
        """Buckets keyed by name, in display order."""
        return {
            "today": self.today,
            "available": self.available,
            "upcoming": self.upcoming,
            "historic": self.historic,
        }


@dataclass(frozen=True)
class Notification:
    """Transient message shown after a user action."""

    message: str
    kind: str  # "success" | "error" | "info"

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


class DashboardView:
    """
    Dashboard state on top of a LessonStore.

    Examples:
        >>> view = DashboardView(store)
        >>> await view.refresh()
        >>> view.select_month(6)
        >>> buckets = view.buckets()
        >>> note = await view.take_class("L007")
        >>> note.message
        'Successfully took the class!'
    """

    CLAIM_SUCCESS_MESSAGE = "Successfully took the class!"

    def __init__(self, store: LessonStore):
        self.store = store
        self.selection = FilterSelection.none()

    def select_month(self, index: int):
        """
        Select a month-window slot.

        Args:
            index: Slot 0-11, or -1 to clear every filter

        Raises:
            ValueError: If index is outside -1..11
        """
        if index == CLEAR_MONTH_INDEX:
            self.clear_filters()
            return

        self.selection = FilterSelection.month(index)
        logger.debug(f"Month filter set to slot {index}")

    def select_date_range(self, start: Optional[datetime], end: Optional[datetime]):
        """
        Select an explicit date range; missing either end clears the range.

        Raises:
            ValueError: If start is after end
        """
        if start is not None and end is not None:
            self.selection = FilterSelection.range(start, end)
            logger.debug(f"Date range filter set to {start.isoformat()} - {end.isoformat()}")
        elif self.selection.kind == SelectionKind.RANGE:
            self.selection = FilterSelection.none()

    def clear_filters(self):
        """Drop any month or range selection."""
        self.selection = FilterSelection.none()

    def _month_range(self, now: Optional[datetime]) -> Optional[DateRange]:
        if self.selection.kind != SelectionKind.MONTH:
            return None
        return resolve_window_slot(self.selection.month_index, now)

    def lessons_for(
        self,
        type_or_today: LessonFilterType,
        now: Optional[datetime] = None
    ) -> List[Lesson]:
        """
        Get one bucket.

        The type or "Today" filter runs first, then the explicit date range,
        then the selected month's full calendar range.
        """
        lessons = self.store.derive(type_or_today, self.selection.date_range, now)

        month = self._month_range(now)
        if month is not None:
            lessons = filter_by_date_range(lessons, month.start, month.end)

        return lessons

    def buckets(self, now: Optional[datetime] = None) -> DashboardBuckets:
        """Derive all four buckets from the store's current collection."""
        return DashboardBuckets(
            today=self.lessons_for(TODAY, now),
            available=self.lessons_for(LessonType.AVAILABLE, now),
            upcoming=self.lessons_for(LessonType.UPCOMING, now),
            historic=self.lessons_for(LessonType.HISTORIC, now),
        )

    def month_slots(self, now: Optional[datetime] = None) -> List[MonthSlot]:
        """Get the 12 month-picker slots, flagged with whether they hold lessons."""
        return window_slots(now, available_slots(self.store.lessons, now))

    async def refresh(self) -> Result[List[Lesson]]:
        """Reload lessons from the service."""
        return await self.store.fetch_all()

    async def take_class(self, lesson_id: str) -> Notification:
        """
        Claim a lesson and report the outcome as a notification.

        Claim failures become error notifications; the buckets keep showing
        the unchanged collection.
        """
        try:
            await self.store.claim(lesson_id)
        except LessonDashboardError as e:
            logger.warning(f"Take class failed for {lesson_id}: {e.message}")
            return Notification(e.message or "Failed to take class", "error")

        return Notification(self.CLAIM_SUCCESS_MESSAGE, "success")

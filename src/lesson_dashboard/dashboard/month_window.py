"""
Month-window calculator.

The month picker shows a fixed 12-slot window around the current month:
slots 0-5 are five months back through the current month, slots 6-11 are
one through six months ahead. Slots are recomputed from "now" on every
call; nothing is cached.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Set

from ..models.filter_selection import DateRange
from ..models.lesson import Lesson
from ..utils.dates import (
    add_months,
    ensure_aware,
    local_now,
    month_key,
    month_range,
    start_of_month,
)


MONTHS_BACK = 5
MONTHS_FORWARD = 6
TOTAL_MONTHS = MONTHS_BACK + 1 + MONTHS_FORWARD
# Slots with index <= this are the current month or earlier
PAST_MONTHS_THRESHOLD = MONTHS_BACK
# Month index the picker sends to clear every filter
CLEAR_MONTH_INDEX = -1

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


@dataclass(frozen=True)
class MonthSlot:
    """
    One month button in the picker.

    Attributes:
        index: Position in the window (0-11)
        year: Calendar year
        month: Calendar month (1-12)
        key: "YYYY-MM"
        has_data: Whether any lesson falls in this month
    """

    index: int
    year: int
    month: int
    key: str
    has_data: bool = False

    @property
    def name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def abbreviation(self) -> str:
        return MONTH_ABBREVIATIONS[self.month - 1]

    @property
    def label(self) -> str:
        """e.g. "November 2025"."""
        return f"{self.name} {self.year}"

    @property
    def short_label(self) -> str:
        """e.g. "Nov 25"."""
        return f"{self.abbreviation} {str(self.year)[-2:]}"


def _reference(now: Optional[datetime]) -> datetime:
    return ensure_aware(now) if now is not None else local_now()


def slot_offset(index: int) -> int:
    """
    Get the month offset from the current month for a window slot.

    Raises:
        ValueError: If index is outside 0-11
    """
    if not 0 <= index < TOTAL_MONTHS:
        raise ValueError(
            f"Month window index must be between 0 and {TOTAL_MONTHS - 1}, got {index}"
        )

    if index <= PAST_MONTHS_THRESHOLD:
        return -(MONTHS_BACK - index)
    return index - MONTHS_BACK


def resolve_window_slot(index: int, now: Optional[datetime] = None) -> DateRange:
    """
    Map a window slot to the full calendar month it stands for.

    Args:
        index: Window slot (0 = five months ago, 5 = current, 11 = six ahead)
        now: Reference time (defaults to the current local time)

    Returns:
        DateRange from the first to the last instant of the target month

    Raises:
        ValueError: If index is outside 0-11

    Examples:
        >>> resolve_window_slot(6, now)  # the whole of next month
    """
    current = start_of_month(_reference(now))
    target = add_months(current, slot_offset(index))
    start, end = month_range(target)
    return DateRange(start, end)


def available_slots(lessons: Iterable[Lesson], now: Optional[datetime] = None) -> Set[str]:
    """
    Get the month keys inside the window that contain at least one lesson.

    Lesson dates are read in the reference time's timezone.

    Args:
        lessons: Lessons to scan
        now: Reference time (defaults to the current local time)

    Returns:
        Set of "YYYY-MM" keys
    """
    reference = _reference(now)
    current = start_of_month(reference)
    window_start = add_months(current, -MONTHS_BACK)
    window_end = add_months(current, MONTHS_FORWARD)

    keys = set()
    for lesson in lessons:
        lesson_month = start_of_month(lesson.date.astimezone(reference.tzinfo))
        if window_start <= lesson_month <= window_end:
            keys.add(month_key(lesson_month))

    return keys


def window_slots(
    now: Optional[datetime] = None,
    available: Optional[Set[str]] = None
) -> List[MonthSlot]:
    """
    Build the 12 picker slots in window order.

    Args:
        now: Reference time (defaults to the current local time)
        available: Month keys with data (see available_slots)

    Returns:
        List of 12 MonthSlot values, index 0 first
    """
    current = start_of_month(_reference(now))
    available = available or set()

    slots = []
    for index in range(TOTAL_MONTHS):
        month_start = add_months(current, slot_offset(index))
        key = month_key(month_start)
        slots.append(MonthSlot(
            index=index,
            year=month_start.year,
            month=month_start.month,
            key=key,
            has_data=key in available,
        ))

    return slots

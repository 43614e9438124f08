"""
Lesson filter engine.

Pure functions over lesson sequences. Output always keeps the relative
order of the input; nothing is sorted.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Union

from ..models.filter_selection import DateRange
from ..models.lesson import TODAY, Lesson, LessonFilterType, LessonType
from ..utils.dates import in_range, today_range


def filter_by_date_range(
    lessons: Iterable[Lesson],
    start: datetime,
    end: datetime
) -> List[Lesson]:
    """Keep lessons whose date lies in [start, end], both ends inclusive."""
    return [lesson for lesson in lessons if in_range(lesson.date, start, end)]


def filter_today(lessons: Iterable[Lesson], now: Optional[datetime] = None) -> List[Lesson]:
    """Keep lessons happening today, whatever their type."""
    start, end = today_range(now)
    return filter_by_date_range(lessons, start, end)


def filter_by_type(lessons: Iterable[Lesson], lesson_type: LessonType) -> List[Lesson]:
    """Keep lessons whose type matches exactly."""
    return [lesson for lesson in lessons if lesson.type == lesson_type]


def filter_lessons(
    lessons: Iterable[Lesson],
    type_or_today: Optional[LessonFilterType] = None,
    date_range: Optional[Union[DateRange, tuple]] = None,
    now: Optional[datetime] = None
) -> List[Lesson]:
    """
    Filter lessons by type (or "Today") and by date range.

    The type/"Today" filter runs first, then the date range narrows the
    result further.

    Args:
        lessons: Lessons to filter
        type_or_today: A LessonType (or its name) for an exact type match,
            or "Today" for lessons dated today regardless of type
        date_range: Inclusive DateRange or (start, end) tuple
        now: Reference time for "Today" (defaults to the current local time)

    Returns:
        Matching lessons in input order

    Raises:
        ValueError: If type_or_today is not a lesson type or "Today"

    Examples:
        >>> filter_lessons(lessons, "Available")
        >>> filter_lessons(lessons, TODAY)
        >>> filter_lessons(lessons, LessonType.UPCOMING, DateRange(start, end))
    """
    filtered = list(lessons)

    if type_or_today is not None:
        if type_or_today == TODAY:
            filtered = filter_today(filtered, now)
        else:
            filtered = filter_by_type(filtered, LessonType(type_or_today))

    if date_range is not None:
        if isinstance(date_range, DateRange):
            start, end = date_range.start, date_range.end
        else:
            start, end = date_range
        filtered = filter_by_date_range(filtered, start, end)

    return filtered

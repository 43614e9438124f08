"""
Date and range helpers for lesson filtering.

All ranges produced here are inclusive on both ends: a lesson that starts
exactly at midnight, or at the last microsecond of a month, belongs to
that day or month.

Calendar semantics are deliberately simple: local time is whatever offset
``datetime.astimezone()`` reports, and month arithmetic is delegated to
``dateutil.relativedelta``.
"""

from datetime import datetime, timedelta
from typing import Optional, Tuple, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def ensure_aware(value: datetime) -> datetime:
    """
    Return a timezone-aware datetime.

    Naive values are interpreted as local time.

    Args:
        value: Datetime to normalise

    Returns:
        Aware datetime (unchanged if it already carries an offset)
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.astimezone()
    return value


def local_now() -> datetime:
    """Get the current local time as an aware datetime."""
    return datetime.now().astimezone()


def parse_instant(value: Union[str, datetime]) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    Args:
        value: ISO-8601 string (e.g. "2025-11-08T10:00:00Z") or datetime

    Returns:
        Aware datetime

    Raises:
        ValueError: If the string is not a valid ISO-8601 timestamp

    Examples:
        >>> parse_instant("2025-11-08T10:00:00Z").isoformat()
        '2025-11-08T10:00:00+00:00'
    """
    if isinstance(value, datetime):
        return ensure_aware(value)

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")

    return ensure_aware(date_parser.isoparse(value.strip()))


def start_of_day(value: datetime) -> datetime:
    """Get 00:00:00.000000 of the given day."""
    return ensure_aware(value).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    """Get 23:59:59.999999 of the given day."""
    return ensure_aware(value).replace(
        hour=23, minute=59, second=59, microsecond=999999
    )


def today_range(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    Get the first and last instant of today in local time.

    Args:
        now: Reference time (defaults to the current local time)

    Returns:
        Tuple of (start, end); an instant d is "today" iff start <= d <= end
    """
    reference = ensure_aware(now) if now is not None else local_now()
    return start_of_day(reference), end_of_day(reference)


def start_of_month(value: datetime) -> datetime:
    """Get the first instant of the month containing ``value``."""
    return start_of_day(value).replace(day=1)


def add_months(value: datetime, months: int) -> datetime:
    """
    Shift a datetime by a number of calendar months.

    Days past the end of the target month are clamped
    (January 31 + 1 month = February 28/29).
    """
    return value + relativedelta(months=months)


def month_range(value: datetime) -> Tuple[datetime, datetime]:
    """
    Get the first and last instant of the month containing ``value``.

    Args:
        value: Any instant within the month

    Returns:
        Tuple of (start, end)

    Examples:
        >>> start, end = month_range(datetime(2025, 2, 14, 9, 30).astimezone())
        >>> (start.day, end.day, end.hour, end.minute)
        (1, 28, 23, 59)
    """
    start = start_of_month(value)
    end = add_months(start, 1) - timedelta(microseconds=1)
    return start, end


def in_range(instant: datetime, start: datetime, end: datetime) -> bool:
    """Check whether ``start <= instant <= end``."""
    return ensure_aware(start) <= ensure_aware(instant) <= ensure_aware(end)


def is_today(instant: datetime, now: Optional[datetime] = None) -> bool:
    """Check whether an instant falls on today's local date."""
    start, end = today_range(now)
    return in_range(instant, start, end)


def month_key(value: datetime) -> str:
    """
    Get the "YYYY-MM" key for the month containing ``value``.

    Examples:
        >>> month_key(datetime(2025, 11, 8))
        '2025-11'
    """
    return value.strftime("%Y-%m")


def format_date(value: Union[str, datetime]) -> str:
    """Format in local time as "November 08, 2025"."""
    return parse_instant(value).astimezone().strftime("%B %d, %Y")


def format_time(value: Union[str, datetime]) -> str:
    """Format in local time as 24-hour "HH:MM"."""
    return parse_instant(value).astimezone().strftime("%H:%M")

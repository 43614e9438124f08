"""
Unit tests for date and range helpers.
"""

from datetime import datetime, timedelta, timezone

import pytest

from lesson_dashboard.utils.dates import (
    add_months,
    ensure_aware,
    format_date,
    format_time,
    in_range,
    is_today,
    month_key,
    month_range,
    parse_instant,
    start_of_month,
    today_range,
)


UTC = timezone.utc


class TestTodayRange:
    """Test cases for today_range."""

    def test_spans_whole_day(self, now):
        """Test range runs from midnight to the last microsecond."""
        start, end = today_range(now)

        assert start == datetime(2025, 11, 10, 0, 0, tzinfo=UTC)
        assert end == datetime(2025, 11, 10, 23, 59, 59, 999999, tzinfo=UTC)

    def test_boundaries_are_today(self, now):
        """Test midnight and the last instant both count as today."""
        start, end = today_range(now)

        assert is_today(start, now)
        assert is_today(end, now)
        assert not is_today(start - timedelta(microseconds=1), now)
        assert not is_today(end + timedelta(microseconds=1), now)

    def test_defaults_to_local_now(self):
        """Test default reference is the current local day."""
        start, end = today_range()

        assert start.tzinfo is not None
        assert start <= datetime.now().astimezone() <= end


class TestMonthRange:
    """Test cases for month_range."""

    def test_regular_month(self):
        """Test a 30-day month."""
        start, end = month_range(datetime(2025, 11, 17, 8, 30, tzinfo=UTC))

        assert start == datetime(2025, 11, 1, tzinfo=UTC)
        assert end == datetime(2025, 11, 30, 23, 59, 59, 999999, tzinfo=UTC)

    def test_leap_february(self):
        """Test February in a leap year ends on the 29th."""
        _, end = month_range(datetime(2024, 2, 10, tzinfo=UTC))

        assert end.day == 29

    def test_december_rolls_year(self):
        """Test December ends on the 31st of the same year."""
        start, end = month_range(datetime(2025, 12, 31, 23, 0, tzinfo=UTC))

        assert start == datetime(2025, 12, 1, tzinfo=UTC)
        assert end.year == 2025
        assert end.day == 31


class TestInRange:
    """Test cases for in_range."""

    def test_inclusive_on_both_ends(self):
        """Test both boundaries are inside the range."""
        start = datetime(2025, 11, 1, tzinfo=UTC)
        end = datetime(2025, 11, 30, tzinfo=UTC)

        assert in_range(start, start, end)
        assert in_range(end, start, end)
        assert not in_range(end + timedelta(microseconds=1), start, end)

    def test_compares_instants_across_offsets(self):
        """Test an instant is compared in absolute time, not wall time."""
        tokyo = timezone(timedelta(hours=9))
        instant = datetime(2025, 11, 2, 8, 0, tzinfo=tokyo)  # 1 Nov 23:00 UTC

        assert in_range(
            instant,
            datetime(2025, 11, 1, tzinfo=UTC),
            datetime(2025, 11, 1, 23, 59, 59, tzinfo=UTC)
        )


class TestParsing:
    """Test cases for timestamp parsing and formatting."""

    def test_parse_zulu(self):
        """Test Z suffix is read as UTC."""
        parsed = parse_instant("2025-11-08T10:00:00Z")

        assert parsed == datetime(2025, 11, 8, 10, 0, tzinfo=UTC)

    def test_parse_offset(self):
        """Test explicit offsets are kept."""
        parsed = parse_instant("2025-11-08T10:00:00+09:00")

        assert parsed.utcoffset() == timedelta(hours=9)

    def test_parse_naive_is_local(self):
        """Test naive timestamps become aware."""
        parsed = parse_instant("2025-11-08T10:00:00")

        assert parsed.tzinfo is not None
        assert parsed.hour == 10

    @pytest.mark.parametrize("value", ["", "not-a-date", "2025-13-45T00:00:00Z", None])
    def test_parse_invalid(self, value):
        """Test invalid values raise ValueError."""
        with pytest.raises(ValueError):
            parse_instant(value)

    def test_ensure_aware_keeps_offset(self):
        """Test aware values are returned unchanged."""
        value = datetime(2025, 1, 1, tzinfo=UTC)

        assert ensure_aware(value) is value

    def test_format_round_trip_in_local_time(self):
        """Test formatting renders the local wall time."""
        local = datetime(2025, 11, 8, 14, 30).astimezone()

        assert format_date(local) == "November 08, 2025"
        assert format_time(local) == "14:30"


class TestMonthArithmetic:
    """Test cases for month helpers."""

    def test_start_of_month(self):
        """Test start_of_month drops day and time."""
        assert start_of_month(datetime(2025, 11, 17, 8, 30, 5, tzinfo=UTC)) == \
            datetime(2025, 11, 1, tzinfo=UTC)

    def test_add_months_crosses_year(self):
        """Test adding months across a year boundary."""
        assert add_months(datetime(2025, 11, 1, tzinfo=UTC), 6) == datetime(2026, 5, 1, tzinfo=UTC)
        assert add_months(datetime(2025, 3, 1, tzinfo=UTC), -5) == datetime(2024, 10, 1, tzinfo=UTC)

    def test_add_months_clamps_day(self):
        """Test month-end days are clamped."""
        assert add_months(datetime(2025, 1, 31, tzinfo=UTC), 1).day == 28

    def test_month_key(self):
        """Test month key format."""
        assert month_key(datetime(2026, 1, 3, tzinfo=UTC)) == "2026-01"

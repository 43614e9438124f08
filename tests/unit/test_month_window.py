"""
Unit tests for the month-window calculator.
"""

from datetime import datetime, timedelta, timezone

import pytest

from lesson_dashboard.dashboard.month_window import (
    TOTAL_MONTHS,
    available_slots,
    resolve_window_slot,
    slot_offset,
    window_slots,
)


UTC = timezone.utc


class TestResolveWindowSlot:
    """Test cases for slot to calendar month mapping."""

    def test_current_month_is_slot_five(self, now):
        """Test slot 5 is the whole current month."""
        date_range = resolve_window_slot(5, now)

        assert date_range.start == datetime(2025, 11, 1, tzinfo=UTC)
        assert date_range.end == datetime(2025, 11, 30, 23, 59, 59, 999999, tzinfo=UTC)

    def test_first_slot_is_five_months_back(self, now):
        """Test slot 0 is five months before the current month."""
        assert resolve_window_slot(0, now).start == datetime(2025, 6, 1, tzinfo=UTC)

    def test_last_slot_crosses_year(self, now):
        """Test slot 11 is six months ahead, in the next year."""
        date_range = resolve_window_slot(11, now)

        assert date_range.start == datetime(2026, 5, 1, tzinfo=UTC)
        assert date_range.end == datetime(2026, 5, 31, 23, 59, 59, 999999, tzinfo=UTC)

    def test_next_month(self, now):
        """Test slot 6 is next month."""
        assert resolve_window_slot(6, now).start == datetime(2025, 12, 1, tzinfo=UTC)

    def test_january_reference_reaches_back_a_year(self):
        """Test the window from January starts in August of the previous year."""
        january = datetime(2026, 1, 15, tzinfo=UTC)

        assert resolve_window_slot(0, january).start == datetime(2025, 8, 1, tzinfo=UTC)

    @pytest.mark.parametrize("index", [-1, 12, 100])
    def test_out_of_window(self, index, now):
        """Test indices outside 0-11 are rejected."""
        with pytest.raises(ValueError):
            resolve_window_slot(index, now)

    def test_offsets(self):
        """Test slot offsets run from -5 to +6."""
        assert [slot_offset(i) for i in range(TOTAL_MONTHS)] == list(range(-5, 7))


class TestAvailableSlots:
    """Test cases for month-with-data detection."""

    def test_months_with_lessons(self, sample_lessons, now):
        """Test every month holding a lesson is reported."""
        assert available_slots(sample_lessons, now) == {
            "2025-09", "2025-10", "2025-11", "2025-12"
        }

    def test_outside_window_ignored(self, lesson_factory, now):
        """Test lessons beyond the window are not reported."""
        lessons = [
            lesson_factory("OLD", datetime(2025, 5, 31, tzinfo=UTC)),
            lesson_factory("FAR", datetime(2026, 6, 1, tzinfo=UTC)),
            lesson_factory("EDGE", datetime(2026, 5, 31, 23, 0, tzinfo=UTC)),
        ]

        assert available_slots(lessons, now) == {"2026-05"}

    def test_empty(self, now):
        """Test no lessons means no months."""
        assert available_slots([], now) == set()


class TestWindowSlots:
    """Test cases for picker slot construction."""

    def test_twelve_slots_in_order(self, now):
        """Test window order and labels."""
        slots = window_slots(now)

        assert len(slots) == TOTAL_MONTHS
        assert [slot.index for slot in slots] == list(range(TOTAL_MONTHS))
        assert slots[0].key == "2025-06"
        assert slots[5].label == "November 2025"
        assert slots[11].short_label == "May 26"

    def test_has_data_flag(self, sample_lessons, now):
        """Test slots are flagged from the available month keys."""
        slots = window_slots(now, available_slots(sample_lessons, now))

        flagged = [slot.index for slot in slots if slot.has_data]
        assert flagged == [3, 4, 5, 6]

    def test_forty_days_ahead_is_next_month(self, lesson_factory, now):
        """Test a lesson 40 days ahead falls in slot 6, not slot 5."""
        lesson = lesson_factory("L40", now + timedelta(days=40))

        current = resolve_window_slot(5, now)
        following = resolve_window_slot(6, now)

        assert not current.start <= lesson.date <= current.end
        assert following.start <= lesson.date <= following.end

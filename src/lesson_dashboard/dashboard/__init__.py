"""
Filtering and month-window logic for the dashboard.

The view-model lives in ``lesson_dashboard.dashboard.view``.
"""

from .filters import filter_by_date_range, filter_by_type, filter_lessons, filter_today
from .month_window import (
    CLEAR_MONTH_INDEX,
    MONTHS_BACK,
    MONTHS_FORWARD,
    TOTAL_MONTHS,
    MonthSlot,
    available_slots,
    resolve_window_slot,
    window_slots,
)

__all__ = [
    "filter_by_date_range",
    "filter_by_type",
    "filter_lessons",
    "filter_today",
    "CLEAR_MONTH_INDEX",
    "MONTHS_BACK",
    "MONTHS_FORWARD",
    "TOTAL_MONTHS",
    "MonthSlot",
    "available_slots",
    "resolve_window_slot",
    "window_slots",
]

"""
Dashboard filter selection.

The dashboard filters either by a month-window slot or by an explicit
date range, never both. FilterSelection models this as a tagged union so
the two can never be set at the same time.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..utils.dates import ensure_aware


WINDOW_SIZE = 12


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive range of instants.

    Attributes:
        start: First instant included
        end: Last instant included
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        if ensure_aware(self.start) > ensure_aware(self.end):
            raise ValueError(
                f"Date range start {self.start.isoformat()} "
                f"is after end {self.end.isoformat()}"
            )


class SelectionKind(Enum):
    """Variants of a filter selection."""
    NONE = "none"
    MONTH = "month"
    RANGE = "range"


@dataclass(frozen=True)
class FilterSelection:
    """
    Current filter choice: nothing, a month-window index, or a date range.

    Build instances with the ``none()``, ``month()`` and ``range()``
    constructors rather than directly.

    Examples:
        >>> selection = FilterSelection.month(5)
        >>> selection.month_index
        5
        >>> selection.date_range is None
        True
    """

    kind: SelectionKind = SelectionKind.NONE
    month_index: Optional[int] = None
    date_range: Optional[DateRange] = None

    def __post_init__(self):
        if self.kind == SelectionKind.MONTH:
            if self.month_index is None or not 0 <= self.month_index < WINDOW_SIZE:
                raise ValueError(
                    f"Month index must be between 0 and {WINDOW_SIZE - 1}, "
                    f"got {self.month_index}"
                )
            if self.date_range is not None:
                raise ValueError("Month selection cannot carry a date range")
        elif self.kind == SelectionKind.RANGE:
            if self.date_range is None:
                raise ValueError("Range selection requires a date range")
            if self.month_index is not None:
                raise ValueError("Range selection cannot carry a month index")
        elif self.month_index is not None or self.date_range is not None:
            raise ValueError("Empty selection cannot carry filter values")

    @classmethod
    def none(cls) -> 'FilterSelection':
        """No filter selected."""
        return cls()

    @classmethod
    def month(cls, index: int) -> 'FilterSelection':
        """Select a month-window slot (0-11)."""
        return cls(kind=SelectionKind.MONTH, month_index=index)

    @classmethod
    def range(cls, start: datetime, end: datetime) -> 'FilterSelection':
        """Select an explicit inclusive date range."""
        return cls(kind=SelectionKind.RANGE, date_range=DateRange(start, end))

    @property
    def is_empty(self) -> bool:
        """Check if no filter is selected."""
        return self.kind == SelectionKind.NONE

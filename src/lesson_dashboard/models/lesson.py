"""
Lesson data models.

Lessons arrive from the lesson service as JSON records and are converted
into immutable Lesson values. ``type`` is authoritative input from the
service; it is never recomputed from ``date``.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..utils.dates import parse_instant


class LessonType(str, Enum):
    """Classification of a lesson as reported by the lesson service."""

    HISTORIC = "Historic"
    UPCOMING = "Upcoming"
    AVAILABLE = "Available"


class LessonStatus(str, Enum):
    """Booking status of a lesson."""

    COMPLETED = "Completed"
    CONFIRMED = "Confirmed"
    AVAILABLE = "Available"


# Selector for lessons happening today, regardless of their type
TODAY = "Today"

LessonFilterType = Union[LessonType, str]

# Status each type is expected to carry
EXPECTED_STATUS = {
    LessonType.HISTORIC: LessonStatus.COMPLETED,
    LessonType.UPCOMING: LessonStatus.CONFIRMED,
    LessonType.AVAILABLE: LessonStatus.AVAILABLE,
}


@dataclass(frozen=True)
class Lesson:
    """
    One bookable, booked or completed tutoring session.

    Attributes:
        id: Unique lesson identifier
        date: Lesson start (timezone-aware)
        type: Historic, Upcoming or Available
        subject: Lesson subject
        students: Student names, in source order (may be empty)
        tutor: Assigned tutor, None while the lesson is Available
        status: Completed, Confirmed or Available

    Examples:
        >>> lesson = Lesson.from_dict({
        ...     "id": "L007",
        ...     "date": "2025-11-12T11:00:00Z",
        ...     "type": "Available",
        ...     "subject": "Python for Kids - Game Projects",
        ...     "students": [],
        ...     "tutor": None,
        ...     "status": "Available"
        ... })
        >>> lesson.is_available
        True
    """

    id: str
    date: datetime
    type: LessonType
    subject: str
    students: Tuple[str, ...] = field(default_factory=tuple)
    tutor: Optional[str] = None
    status: LessonStatus = LessonStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        """Check if the lesson can be claimed."""
        return self.type == LessonType.AVAILABLE

    def with_changes(self, **changes: Any) -> 'Lesson':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> 'Lesson':
        """
        Create a Lesson from a wire record.

        Args:
            record: Mapping with id, date, type, subject, students, tutor, status

        Returns:
            Lesson instance

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field holds an invalid value
        """
        students = record.get("students") or ()
        if isinstance(students, str) or not isinstance(students, (list, tuple)):
            raise ValueError(f"students must be a list, got {type(students).__name__}")

        tutor = record.get("tutor")

        return cls(
            id=str(record["id"]),
            date=parse_instant(record["date"]),
            type=LessonType(record["type"]),
            subject=str(record["subject"]),
            students=tuple(str(name) for name in students),
            tutor=str(tutor) if tutor else None,
            status=LessonStatus(record["status"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the wire record shape.

        Returns:
            Dictionary with the date rendered as ISO-8601
        """
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "type": self.type.value,
            "subject": self.subject,
            "students": list(self.students),
            "tutor": self.tutor,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class User:
    """Authenticated tutor."""

    id: str
    name: str
    email: str

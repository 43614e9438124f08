"""Lesson dashboard data models."""

from .filter_selection import DateRange, FilterSelection, SelectionKind
from .lesson import (
    EXPECTED_STATUS,
    TODAY,
    Lesson,
    LessonFilterType,
    LessonStatus,
    LessonType,
    User,
)
from .result import Result, ResultStatus
from .schema_version import SchemaVersion, VersionedData

__all__ = [
    "DateRange",
    "FilterSelection",
    "SelectionKind",
    "EXPECTED_STATUS",
    "TODAY",
    "Lesson",
    "LessonFilterType",
    "LessonStatus",
    "LessonType",
    "User",
    "Result",
    "ResultStatus",
    "SchemaVersion",
    "VersionedData",
]

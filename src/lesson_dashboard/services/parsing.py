"""
Conversion of raw lesson service payloads into Lesson values.
"""

import logging
from typing import Any, List, Optional

from ..errors import ParseFailureError
from ..models.lesson import Lesson
from ..validation.lesson_validator import LessonValidator


logger = logging.getLogger(__name__)


def parse_lesson_records(
    payload: Any,
    validator: Optional[LessonValidator] = None
) -> List[Lesson]:
    """
    Validate and convert a fetch payload.

    Accepts either a JSON array of lesson records or an object with a
    ``lessons`` array. Contract warnings are logged and the record is kept;
    any structural error rejects the whole payload.

    Args:
        payload: Decoded JSON response
        validator: Validator to use (a fresh LessonValidator by default)

    Returns:
        Lessons in payload order

    Raises:
        ParseFailureError: If the payload or any record is malformed,
            or two records share an id
    """
    if isinstance(payload, dict) and "lessons" in payload:
        payload = payload["lessons"]

    if not isinstance(payload, list):
        raise ParseFailureError(
            f"Expected a list of lessons, got {type(payload).__name__}"
        )

    validator = validator or LessonValidator()
    errors: List[str] = []
    lessons: List[Lesson] = []
    seen_ids = set()

    for index, record in enumerate(payload):
        result = validator.validate(record)

        if not result.is_valid:
            logger.error(f"Rejected lesson record {index}:\n{result.get_summary()}")
            errors.extend(f"record {index}: {error}" for error in result.errors)
            continue

        for warning in result.warnings:
            logger.warning(f"Accepting lesson with contract violation: {warning}")

        lesson = Lesson.from_dict(record)
        if lesson.id in seen_ids:
            errors.append(f"record {index}: duplicate lesson id {lesson.id}")
            continue

        seen_ids.add(lesson.id)
        lessons.append(lesson)

    if errors:
        raise ParseFailureError(
            f"Malformed lessons response ({len(errors)} problem(s)): {errors[0]}",
            errors=errors
        )

    logger.debug(f"Parsed {len(lessons)} lessons")
    return lessons

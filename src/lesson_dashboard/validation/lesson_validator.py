"""
Lesson record validator.

Validates lesson records received from the lesson service before they are
converted into Lesson values.
"""

from typing import Any, Dict

from ..models.lesson import EXPECTED_STATUS, LessonStatus, LessonType
from .validators import Validator, ValidationResult


class LessonValidator(Validator):
    """
    Validator for lesson records.

    Errors (record rejected):
    - Missing id, date, type, subject or status
    - Unknown type or status, unparseable date
    - students not a list of strings, tutor not a string

    Warnings (record accepted as-is):
    - type/status/tutor combinations that break the service contract,
      e.g. an Upcoming lesson with status Available

    Examples:
        >>> validator = LessonValidator()
        >>> result = validator.validate({
        ...     "id": "L004",
        ...     "date": "2025-11-08T10:00:00Z",
        ...     "type": "Upcoming",
        ...     "subject": "Minecraft Redstone Logic",
        ...     "students": ["Emma", "Noah"],
        ...     "tutor": "Sarah Tan",
        ...     "status": "Confirmed"
        ... })
        >>> result.is_valid
        True
    """

    REQUIRED_FIELDS = ["id", "date", "type", "subject", "status"]

    VALID_TYPES = [t.value for t in LessonType]
    VALID_STATUSES = [s.value for s in LessonStatus]

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """
        Validate a lesson record.

        Args:
            data: Lesson record dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        result = ValidationResult(is_valid=True)

        if not isinstance(data, dict):
            return result.add_error(
                f"Lesson record must be an object, got {type(data).__name__}"
            )

        for error in self.validate_required_fields(data, self.REQUIRED_FIELDS):
            result.add_error(error)

        if not result.is_valid:
            return result

        error = self.validate_string_length(data["id"], "id", min_length=1, max_length=100)
        if error:
            result.add_error(error)

        error = self.validate_iso_datetime(data["date"], "date")
        if error:
            result.add_error(error)

        error = self.validate_string_length(data["subject"], "subject", max_length=200)
        if error:
            result.add_error(error)

        error = self.validate_choice(data["type"], self.VALID_TYPES, "type")
        if error:
            result.add_error(error)

        error = self.validate_choice(data["status"], self.VALID_STATUSES, "status")
        if error:
            result.add_error(error)

        students = data.get("students")
        if students is not None:
            if not isinstance(students, list):
                result.add_error(
                    f"students must be a list, got {type(students).__name__}"
                )
            elif not all(isinstance(name, str) for name in students):
                result.add_error("students must contain only strings")

        tutor = data.get("tutor")
        if tutor is not None and not isinstance(tutor, str):
            result.add_error(f"tutor must be a string, got {type(tutor).__name__}")

        if result.is_valid:
            self._check_contract(data, result)

        return result

    def _check_contract(self, data: Dict[str, Any], result: ValidationResult):
        """Warn about type/status/tutor combinations the service should not send."""
        lesson_type = LessonType(data["type"])
        expected = EXPECTED_STATUS[lesson_type]

        if data["status"] != expected.value:
            result.add_warning(
                f"Lesson {data['id']}: type {lesson_type.value} "
                f"expects status {expected.value}, got {data['status']}"
            )

        if lesson_type == LessonType.AVAILABLE and data.get("tutor"):
            result.add_warning(
                f"Lesson {data['id']}: Available lesson already has tutor {data['tutor']}"
            )

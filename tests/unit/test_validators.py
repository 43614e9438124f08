"""
Unit tests for validation layer.
"""

import pytest

from lesson_dashboard.validation.lesson_validator import LessonValidator
from lesson_dashboard.validation.validators import ValidationResult


class TestValidationResult:
    """Test cases for ValidationResult."""

    def test_valid_result(self):
        """Test creating a valid result."""
        result = ValidationResult(is_valid=True)

        assert result.is_valid
        assert not result.has_errors
        assert not result.has_warnings
        assert result.get_summary() == "Validation passed"

    def test_add_error(self):
        """Test adding errors."""
        result = ValidationResult(is_valid=True)
        result.add_error("First error").add_error("Second error")

        assert not result.is_valid
        assert len(result.errors) == 2

    def test_add_warning(self):
        """Test adding warnings."""
        result = ValidationResult(is_valid=True)
        result.add_warning("Warning message")

        assert result.is_valid  # Warnings don't affect validity
        assert result.has_warnings

    def test_get_summary_with_errors_and_warnings(self):
        """Test summary lists errors then warnings."""
        result = ValidationResult(is_valid=True)
        result.add_error("Error 1")
        result.add_warning("Warning 1")

        summary = result.get_summary()

        assert "Errors (1)" in summary
        assert "Warnings (1)" in summary
        assert summary.index("Error 1") < summary.index("Warning 1")


class TestLessonValidator:
    """Test cases for LessonValidator."""

    @pytest.fixture
    def validator(self):
        """Create validator instance."""
        return LessonValidator()

    @pytest.fixture
    def valid_lesson(self):
        """Create valid lesson data."""
        return {
            "id": "L004",
            "date": "2025-11-08T10:00:00Z",
            "type": "Upcoming",
            "subject": "Minecraft Redstone Logic",
            "students": ["Emma", "Noah"],
            "tutor": "Sarah Tan",
            "status": "Confirmed",
        }

    def test_valid_lesson(self, validator, valid_lesson):
        """Test validation of valid lesson."""
        result = validator.validate(valid_lesson)

        assert result.is_valid
        assert not result.has_warnings

    def test_available_without_students_or_tutor(self, validator):
        """Test an unassigned available lesson is clean."""
        result = validator.validate({
            "id": "L007",
            "date": "2025-11-12T11:00:00Z",
            "type": "Available",
            "subject": "Python for Kids",
            "students": [],
            "tutor": None,
            "status": "Available",
        })

        assert result.is_valid
        assert not result.has_warnings

    @pytest.mark.parametrize("field_name", ["id", "date", "type", "subject", "status"])
    def test_missing_required_field(self, validator, valid_lesson, field_name):
        """Test each required field is enforced."""
        del valid_lesson[field_name]

        result = validator.validate(valid_lesson)

        assert not result.is_valid
        assert f"Missing required field: {field_name}" in result.errors

    def test_invalid_date(self, validator, valid_lesson):
        """Test an unparseable date is an error."""
        valid_lesson["date"] = "next tuesday"

        result = validator.validate(valid_lesson)

        assert not result.is_valid
        assert any("Invalid date format" in e for e in result.errors)

    def test_invalid_type(self, validator, valid_lesson):
        """Test an unknown type is an error."""
        valid_lesson["type"] = "Cancelled"

        result = validator.validate(valid_lesson)

        assert not result.is_valid
        assert any("Invalid type" in e for e in result.errors)

    def test_students_not_list(self, validator, valid_lesson):
        """Test students must be a list."""
        valid_lesson["students"] = "Emma, Noah"

        result = validator.validate(valid_lesson)

        assert not result.is_valid

    def test_students_not_strings(self, validator, valid_lesson):
        """Test student entries must be strings."""
        valid_lesson["students"] = ["Emma", 7]

        assert not validator.validate(valid_lesson).is_valid

    def test_tutor_not_string(self, validator, valid_lesson):
        """Test tutor must be a string."""
        valid_lesson["tutor"] = {"name": "Sarah"}

        assert not validator.validate(valid_lesson).is_valid

    def test_not_a_dict(self, validator):
        """Test non-object records are rejected."""
        result = validator.validate(["L001"])

        assert not result.is_valid
        assert "must be an object" in result.errors[0]

    def test_status_mismatch_is_warning(self, validator, valid_lesson):
        """Test a type/status mismatch is accepted with a warning."""
        valid_lesson["status"] = "Available"

        result = validator.validate(valid_lesson)

        assert result.is_valid
        assert any("expects status Confirmed" in w for w in result.warnings)

    def test_available_with_tutor_is_warning(self, validator):
        """Test an available lesson with a tutor is accepted with a warning."""
        result = validator.validate({
            "id": "L008",
            "date": "2025-11-13T09:00:00Z",
            "type": "Available",
            "subject": "Scratch",
            "tutor": "Someone",
            "status": "Available",
        })

        assert result.is_valid
        assert any("already has tutor" in w for w in result.warnings)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

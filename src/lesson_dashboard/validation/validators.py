"""
Validation framework for incoming service records.

This module provides:
- Abstract Validator interface
- ValidationResult for consistent validation reporting
- Field-level checks shared by concrete validators
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from ..utils.dates import parse_instant


@dataclass
class ValidationResult:
    """
    Result of data validation.

    Errors make a record unusable; warnings are reported but the record is
    still accepted.

    Attributes:
        is_valid: Whether validation passed
        errors: List of error messages
        warnings: List of warning messages (non-fatal)
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> 'ValidationResult':
        """
        Add an error message.

        Returns:
            Self for method chaining
        """
        self.errors.append(message)
        self.is_valid = False
        return self

    def add_warning(self, message: str) -> 'ValidationResult':
        """
        Add a warning message.

        Returns:
            Self for method chaining
        """
        self.warnings.append(message)
        return self

    @property
    def has_errors(self) -> bool:
        """Check if there are errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are warnings."""
        return len(self.warnings) > 0

    def get_summary(self) -> str:
        """
        Get validation summary.

        Returns:
            Human-readable summary of validation results
        """
        if self.is_valid and not self.has_warnings:
            return "Validation passed"

        parts = []

        if self.has_errors:
            parts.append(f"Errors ({len(self.errors)}):")
            for error in self.errors:
                parts.append(f"  - {error}")

        if self.has_warnings:
            parts.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                parts.append(f"  - {warning}")

        return "\n".join(parts)


class Validator(ABC):
    """
    Abstract base class for validators.

    Subclasses implement validate(); the helpers below return an error
    message, or None when the value is acceptable.
    """

    @abstractmethod
    def validate(self, data: Any) -> ValidationResult:
        """
        Validate data.

        Args:
            data: Data to validate

        Returns:
            ValidationResult with errors and warnings
        """
        pass

    def validate_required_fields(
        self,
        data: dict,
        required_fields: List[str]
    ) -> List[str]:
        """
        Validate that required fields exist and are not null.

        Returns:
            List of error messages for missing fields
        """
        errors = []
        for name in required_fields:
            if name not in data or data[name] is None:
                errors.append(f"Missing required field: {name}")
        return errors

    def validate_iso_datetime(
        self,
        value: Any,
        field_name: str = "date"
    ) -> Optional[str]:
        """
        Validate an ISO-8601 timestamp (e.g. 2025-11-08T10:00:00Z).

        Returns:
            Error message if invalid, None if valid
        """
        try:
            parse_instant(value)
        except (TypeError, ValueError, OverflowError):
            return f"Invalid {field_name} format: {value!r} (expected ISO-8601)"
        return None

    def validate_choice(
        self,
        value: Any,
        choices: Iterable[str],
        field_name: str
    ) -> Optional[str]:
        """
        Validate that a value is one of the allowed choices.

        Returns:
            Error message if invalid, None if valid
        """
        allowed = list(choices)
        if value not in allowed:
            return (
                f"Invalid {field_name}: {value} "
                f"(must be one of: {', '.join(allowed)})"
            )
        return None

    def validate_string_length(
        self,
        value: Any,
        field_name: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None
    ) -> Optional[str]:
        """
        Validate string length.

        Returns:
            Error message if invalid, None if valid
        """
        if not isinstance(value, str):
            return f"{field_name} must be a string, got {type(value).__name__}"

        length = len(value)

        if min_length is not None and length < min_length:
            return f"{field_name} must be at least {min_length} characters, got {length}"

        if max_length is not None and length > max_length:
            return f"{field_name} must be at most {max_length} characters, got {length}"

        return None

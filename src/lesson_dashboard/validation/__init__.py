"""Validation of lesson service records."""

from .lesson_validator import LessonValidator
from .validators import ValidationResult, Validator

__all__ = ["LessonValidator", "ValidationResult", "Validator"]

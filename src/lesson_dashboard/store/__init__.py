"""Single-owner lesson store."""

from .lesson_store import LessonStore, LoadingState

__all__ = ["LessonStore", "LoadingState"]

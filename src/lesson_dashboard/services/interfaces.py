"""
Abstract interface for lesson services.

The lesson store depends on this abstraction rather than on a concrete
HTTP client, which keeps the store testable with fakes and lets the mock
service stand in during development.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, List, TypeVar

from ..errors import ServiceTimeoutError
from ..models.lesson import Lesson


T = TypeVar('T')

DEFAULT_TIMEOUT = 30.0  # seconds


async def bounded(operation: Awaitable[T], timeout: float, description: str) -> T:
    """
    Await an operation within a fixed timeout budget.

    Args:
        operation: Awaitable to run
        timeout: Budget in seconds
        description: What is being awaited, for the error message

    Returns:
        The operation's result

    Raises:
        ServiceTimeoutError: If the budget is exceeded
    """
    try:
        return await asyncio.wait_for(operation, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise ServiceTimeoutError(
            f"{description} timed out after {timeout:g}s",
            timeout=timeout
        ) from e


class LessonService(ABC):
    """
    Source of lessons and sink for claims.

    Implementations bound every call by ``timeout`` seconds and report
    failures with the errors from ``lesson_dashboard.errors``:
    NetworkFailureError, ServiceTimeoutError and ParseFailureError.
    """

    timeout: float = DEFAULT_TIMEOUT

    @abstractmethod
    async def fetch_lessons(self) -> List[Lesson]:
        """
        Fetch every lesson visible to the tutor.

        Returns:
            Lessons in source order
        """
        pass

    @abstractmethod
    async def claim_lesson(self, lesson_id: str) -> Dict[str, Any]:
        """
        Claim an available lesson for the current tutor.

        Args:
            lesson_id: ID of the lesson to claim

        Returns:
            Lesson record in its claimed state; may be partial
        """
        pass

    async def aclose(self):
        """Release resources held by the service."""
        pass

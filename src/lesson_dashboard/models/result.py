"""
Result<T> wrapper for operations whose failure is reported, not raised.

The lesson store uses it for fetches: a failed fetch is absorbed into the
store's error slot, and the caller receives a Result describing the same
outcome instead of an exception.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar


T = TypeVar('T')


class ResultStatus(Enum):
    """Status of a Result."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class Result(Generic[T]):
    """
    Outcome of an operation that may succeed or fail.

    Attributes:
        status: SUCCESS or FAILURE
        value: Result value on success (None on failure)
        error: Exception that caused the failure, if any
        message: Optional human-readable description

    Examples:
        >>> result = await store.fetch_all()
        >>> if result.is_success:
        ...     print(f"{len(result.value)} lessons loaded")
        ... else:
        ...     print(f"Fetch failed: {result.message}")
    """

    status: ResultStatus
    value: Optional[T] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the result represents success."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failure(self) -> bool:
        """Check if the result represents failure."""
        return self.status == ResultStatus.FAILURE

    @classmethod
    def success(cls, value: T, message: Optional[str] = None) -> 'Result[T]':
        """Create a successful result."""
        return cls(status=ResultStatus.SUCCESS, value=value, message=message)

    @classmethod
    def failure(
        cls,
        message: str,
        error: Optional[Exception] = None
    ) -> 'Result[T]':
        """Create a failed result."""
        return cls(status=ResultStatus.FAILURE, message=message, error=error)

    @classmethod
    def from_error(cls, error: Exception) -> 'Result[T]':
        """
        Create a failed result whose message is the exception text.

        Args:
            error: Exception describing the failure

        Returns:
            Result with FAILURE status
        """
        return cls.failure(str(error) or type(error).__name__, error)

    def unwrap(self) -> T:
        """
        Get the value of a successful result.

        Raises:
            Exception: The stored error, if the failure carries one
            ValueError: If the failure carries no exception
        """
        if self.is_failure:
            if self.error is not None:
                raise self.error
            raise ValueError(f"Cannot unwrap failure result: {self.message}")
        return self.value

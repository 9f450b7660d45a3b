"""
Tagged success/failure result returned by every use case.

Expected business outcomes (not found, conflict, invalid input) travel
as values. Only the interface layer turns a failure into an HTTP error.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from user_service.domain.users.errors import UserDomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a use case: either ``value`` or ``error`` is set."""

    value: Optional[T] = None
    error: Optional[UserDomainError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: UserDomainError) -> "Result[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

"""
Domain-specific errors for the users bounded context.

Every failure the domain or application layer can report is defined here.
Use cases return these as values inside a Result; the interface layer
raises them and the centralized handlers map them to HTTP responses.
No framework imports allowed.
"""

from typing import Any, Optional


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(UserDomainError):
    """Raised when input or entity state violates a domain invariant."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field

    @property
    def details(self) -> list[dict[str, Any]]:
        """Per-field details in the same shape as request validation errors."""
        return [{"field": self.field or "", "message": self.message}]


class ConflictError(UserDomainError):
    """Raised when a user with the same email already exists."""

    code = "USER_ALREADY_EXISTS"

    def __init__(self, email: str) -> None:
        super().__init__("User with this email already exists")
        self.email = email


class NotFoundError(UserDomainError):
    """Raised when no user exists for the given ID."""

    code = "USER_NOT_FOUND"

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class UnknownError(UserDomainError):
    """Raised for failures with no more specific classification."""

    code = "INTERNAL_ERROR"

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unexpected failure: {reason}")
        self.reason = reason

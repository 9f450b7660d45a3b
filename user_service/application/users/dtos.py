"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from user_service.domain.users.entities import User


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        email: Email address; must be unique across users.
        name: Display name.
    """

    email: str
    name: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for updating a user.

    Attributes:
        name: New display name, or None to leave it unchanged.
    """

    name: Optional[str] = None


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user, timestamps as ISO-8601 strings."""

    id: str
    email: str
    name: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class DeleteUserResult:
    """Output DTO for a delete operation."""

    success: bool


def isoformat(value: datetime) -> str:
    """Render ``value`` as an ISO-8601 UTC string with a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.astimezone(timezone.utc).isoformat(timespec="microseconds")
    return rendered.replace("+00:00", "Z")


def to_user_result(user: User) -> UserResult:
    """Map a User entity to its response DTO."""
    return UserResult(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=isoformat(user.created_at),
        updated_at=isoformat(user.updated_at),
    )

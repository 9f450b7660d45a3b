"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from user_service.domain.users.errors import ValidationError
from user_service.domain.users.value_objects import normalize_email

NAME_MAX_LEN = 100


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    """A registered user.

    Construction validates every invariant, so an instance is never
    observable in an invalid state. Email is stored normalized and name
    is stored trimmed. Mutations return a new instance.

    Attributes:
        id: Opaque identifier, immutable once assigned.
        email: Normalized email address (unique per repository).
        name: Display name, 1-100 characters.
        created_at: When the user was created.
        updated_at: When the user was last changed.
    """

    id: str
    email: str
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("User ID is required", field="id")

        object.__setattr__(self, "email", normalize_email(self.email))

        name = (self.name or "").strip()
        if not name:
            raise ValidationError("User name is required", field="name")
        if len(name) > NAME_MAX_LEN:
            raise ValidationError(
                f"User name must not exceed {NAME_MAX_LEN} characters",
                field="name",
            )
        object.__setattr__(self, "name", name)

    def update_name(self, new_name: str, at: Optional[datetime] = None) -> "User":
        """Return a copy with ``new_name`` and a refreshed ``updated_at``.

        The new timestamp is always strictly later than the current one.
        Raises ValidationError for an invalid name; ``self`` is untouched.
        """
        now = at or utcnow()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        return replace(self, name=new_name, updated_at=now)

"""
Value objects for the users bounded context.

Value objects are immutable and self-validating.
"""

import re
from dataclasses import dataclass

from user_service.domain.users.errors import ValidationError

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
EMAIL_MAX_LEN = 255

_EMAIL_RE = re.compile(EMAIL_PATTERN)


@dataclass(frozen=True)
class Email:
    """A normalized (trimmed, lower-cased) email address."""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()
        if not normalized:
            raise ValidationError("Email cannot be empty", field="email")
        if not _EMAIL_RE.match(normalized):
            raise ValidationError("Invalid email format", field="email")
        if len(normalized) > EMAIL_MAX_LEN:
            raise ValidationError(
                f"Email must not exceed {EMAIL_MAX_LEN} characters", field="email"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


def normalize_email(raw: str) -> str:
    """Return the canonical form of ``raw``, raising ValidationError if invalid."""
    return Email(raw or "").value

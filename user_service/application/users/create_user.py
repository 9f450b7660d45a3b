"""
Use case: Create a new user.

Input: CreateUserCommand (email, name)
Output: Result[UserResult]
Side effects: Persists the new user.
Failure cases: ValidationError, ConflictError.
"""

import secrets
import string
import time
from datetime import datetime
from typing import Callable

from user_service.application.result import Result
from user_service.application.users.dtos import (
    CreateUserCommand,
    UserResult,
    to_user_result,
)
from user_service.domain.users.entities import User, utcnow
from user_service.domain.users.errors import ConflictError, ValidationError
from user_service.domain.users.ports import UserRepository
from user_service.domain.users.value_objects import normalize_email

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LEN = 9


def generate_user_id() -> str:
    """Return an opaque id: millisecond timestamp plus random base36 chars."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_RANDOM_LEN))
    return f"user_{int(time.time() * 1000)}_{suffix}"


class CreateUserUseCase:
    """Orchestrates user registration.

    Rejects duplicate emails, builds a validated User and stores it
    through an atomic insert-if-absent so concurrent requests with the
    same email cannot both succeed.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        clock: Callable[[], datetime] = utcnow,
        id_factory: Callable[[], str] = generate_user_id,
    ) -> None:
        self._user_repo = user_repo
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, command: CreateUserCommand) -> Result[UserResult]:
        """Run the create user use case.

        Args:
            command: Email and name of the new user.

        Returns:
            A successful result with the created user, or a failure
            carrying ValidationError or ConflictError.
        """
        try:
            email = normalize_email(command.email)
        except ValidationError as exc:
            return Result.failure(exc)

        if self._user_repo.find_by_email(email) is not None:
            return Result.failure(ConflictError(email))

        now = self._clock()
        try:
            user = User(
                id=self._id_factory(),
                email=email,
                name=command.name,
                created_at=now,
                updated_at=now,
            )
        except ValidationError as exc:
            return Result.failure(exc)

        created = self._user_repo.create_if_email_absent(user)
        if created is None:
            return Result.failure(ConflictError(email))

        return Result.success(to_user_result(created))

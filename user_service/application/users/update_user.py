"""
Use case: Update an existing user.

Input: user_id, UpdateUserCommand (optional name)
Output: Result[UserResult]
Side effects: Replaces the stored user when a field changes.
Failure cases: NotFoundError, ValidationError.
"""

from datetime import datetime
from typing import Callable

from user_service.application.result import Result
from user_service.application.users.dtos import (
    UpdateUserCommand,
    UserResult,
    to_user_result,
)
from user_service.domain.users.entities import utcnow
from user_service.domain.users.errors import NotFoundError, ValidationError
from user_service.domain.users.ports import UserRepository


class UpdateUserUseCase:
    """Applies a partial update to a user.

    Only ``name`` is updatable. When no field is supplied the stored
    user is returned as-is: ``updated_at`` keeps its value and nothing
    is written.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._user_repo = user_repo
        self._clock = clock

    def execute(self, user_id: str, command: UpdateUserCommand) -> Result[UserResult]:
        """Run the update user use case.

        Args:
            user_id: Identifier of the user to update.
            command: Fields to change.

        Returns:
            The updated user, or a NotFoundError / ValidationError failure.
        """
        user = self._user_repo.find_by_id(user_id)
        if user is None:
            return Result.failure(NotFoundError(user_id))

        if command.name is None:
            return Result.success(to_user_result(user))

        try:
            updated = user.update_name(command.name, at=self._clock())
        except ValidationError as exc:
            return Result.failure(exc)

        # The user may have been deleted since the lookup.
        saved = self._user_repo.replace_if_present(updated)
        if saved is None:
            return Result.failure(NotFoundError(user_id))
        return Result.success(to_user_result(saved))

"""
Use case: Delete a user.

Input: user_id
Output: Result[DeleteUserResult]
Side effects: Removes the user from the repository.
Failure cases: NotFoundError.
"""

from user_service.application.result import Result
from user_service.application.users.dtos import DeleteUserResult
from user_service.domain.users.errors import NotFoundError
from user_service.domain.users.ports import UserRepository


class DeleteUserUseCase:
    """Removes a user. Deleting an unknown or already deleted id fails."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: str) -> Result[DeleteUserResult]:
        """Run the delete user use case.

        Args:
            user_id: Identifier of the user to delete.

        Returns:
            ``DeleteUserResult(success=True)``, or a NotFoundError failure.
        """
        if self._user_repo.find_by_id(user_id) is None:
            return Result.failure(NotFoundError(user_id))

        # A concurrent delete may win between the lookup and this call.
        if not self._user_repo.delete(user_id):
            return Result.failure(NotFoundError(user_id))

        return Result.success(DeleteUserResult(success=True))

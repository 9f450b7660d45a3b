"""
Use case: Retrieve a single user by ID.

Input: user_id
Output: Result[UserResult]
Side effects: None (read-only query).
Failure cases: NotFoundError.
"""

from user_service.application.result import Result
from user_service.application.users.dtos import UserResult, to_user_result
from user_service.domain.users.errors import NotFoundError
from user_service.domain.users.ports import UserRepository


class GetUserUseCase:
    """Looks up one user by its identifier."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: str) -> Result[UserResult]:
        """Run the get user use case.

        Args:
            user_id: Identifier of the user to fetch.

        Returns:
            The user, or a NotFoundError failure.
        """
        user = self._user_repo.find_by_id(user_id)
        if user is None:
            return Result.failure(NotFoundError(user_id))
        return Result.success(to_user_result(user))

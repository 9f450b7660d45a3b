"""
Use case: Retrieve every stored user.

Input: None
Output: Result[list[UserResult]]
Side effects: None (read-only query).
Failure cases: None.
"""

from user_service.application.result import Result
from user_service.application.users.dtos import UserResult, to_user_result
from user_service.domain.users.ports import UserRepository


class GetAllUsersUseCase:
    """Lists all users. An empty store yields an empty list."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> Result[list[UserResult]]:
        return Result.success(
            [to_user_result(user) for user in self._user_repo.find_all()]
        )

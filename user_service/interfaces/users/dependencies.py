"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the store owned by the
application (``app.state.user_store``, created in ``create_app``) into
the repository adapter and the use cases via constructor injection.
"""

from fastapi import Depends, Request

from user_service.application.users.create_user import CreateUserUseCase
from user_service.application.users.delete_user import DeleteUserUseCase
from user_service.application.users.get_all_users import GetAllUsersUseCase
from user_service.application.users.get_user import GetUserUseCase
from user_service.application.users.update_user import UpdateUserUseCase
from user_service.domain.users.ports import UserRepository
from user_service.infrastructure.users.in_memory_store import InMemoryUserStore
from user_service.infrastructure.users.user_repository import InMemoryUserRepository


def get_user_store(request: Request) -> InMemoryUserStore:
    """Return the store constructed by the composition root."""
    return request.app.state.user_store


def get_user_repository(
    store: InMemoryUserStore = Depends(get_user_store),
) -> UserRepository:
    """Build the repository adapter over the application's store."""
    return InMemoryUserRepository(store)


def get_create_user_use_case(
    repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(user_repo=repo)


def get_user_use_case(
    repo: UserRepository = Depends(get_user_repository),
) -> GetUserUseCase:
    """Build GetUserUseCase with its infrastructure dependencies."""
    return GetUserUseCase(user_repo=repo)


def get_all_users_use_case(
    repo: UserRepository = Depends(get_user_repository),
) -> GetAllUsersUseCase:
    """Build GetAllUsersUseCase with its infrastructure dependencies."""
    return GetAllUsersUseCase(user_repo=repo)


def get_update_user_use_case(
    repo: UserRepository = Depends(get_user_repository),
) -> UpdateUserUseCase:
    """Build UpdateUserUseCase with its infrastructure dependencies."""
    return UpdateUserUseCase(user_repo=repo)


def get_delete_user_use_case(
    repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(user_repo=repo)

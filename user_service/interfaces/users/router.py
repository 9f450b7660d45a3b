"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Use cases return tagged results; a failure is raised here and mapped
to an HTTP response by the centralized error handlers.
"""

from typing import Annotated, Optional, TypeVar

from fastapi import APIRouter, Depends, Path

from user_service.application.result import Result
from user_service.application.users.create_user import CreateUserUseCase
from user_service.application.users.delete_user import DeleteUserUseCase
from user_service.application.users.dtos import (
    CreateUserCommand,
    UpdateUserCommand,
    UserResult,
)
from user_service.application.users.get_all_users import GetAllUsersUseCase
from user_service.application.users.get_user import GetUserUseCase
from user_service.application.users.update_user import UpdateUserUseCase
from user_service.interfaces.schemas import ErrorResponse
from user_service.interfaces.users.dependencies import (
    get_all_users_use_case,
    get_create_user_use_case,
    get_delete_user_use_case,
    get_update_user_use_case,
    get_user_use_case,
)
from user_service.interfaces.users.schemas import (
    CreateUserRequest,
    DeleteUserItem,
    DeleteUserResponse,
    UpdateUserRequest,
    UserItem,
    UserResponse,
    UsersListResponse,
)

T = TypeVar("T")

router = APIRouter(prefix="/users", tags=["users"])

UserId = Annotated[
    str,
    Path(min_length=1, pattern=r"\S", description="Unique user identifier"),
]


def _unwrap(result: Result[T]) -> T:
    if result.error is not None:
        raise result.error
    return result.value


def _to_item(user: UserResult) -> UserItem:
    return UserItem(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post(
    "",
    status_code=201,
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a new user",
    description="Create a user with email and name. Email must be unique.",
)
def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Create a user."""
    command = CreateUserCommand(email=request.email, name=request.name)
    user = _unwrap(use_case.execute(command))
    return UserResponse(data=_to_item(user))


@router.get(
    "",
    response_model=UsersListResponse,
    summary="Get all users",
    description="Retrieve every user. Returns an empty list when there are none.",
)
def list_users(
    use_case: GetAllUsersUseCase = Depends(get_all_users_use_case),
) -> UsersListResponse:
    """List all users."""
    users = _unwrap(use_case.execute())
    return UsersListResponse(data=[_to_item(u) for u in users])


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get user by ID",
)
def get_user(
    user_id: UserId,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse:
    """Fetch a single user."""
    user = _unwrap(use_case.execute(user_id))
    return UserResponse(data=_to_item(user))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update user",
    description="Update a user's name. Omitted fields are left unchanged.",
)
def update_user(
    user_id: UserId,
    request: Optional[UpdateUserRequest] = None,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
) -> UserResponse:
    """Update a user. A missing body is treated as an empty one."""
    command = UpdateUserCommand(name=request.name if request else None)
    user = _unwrap(use_case.execute(user_id, command))
    return UserResponse(data=_to_item(user))


@router.delete(
    "/{user_id}",
    response_model=DeleteUserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete user",
)
def delete_user(
    user_id: UserId,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> DeleteUserResponse:
    """Delete a user."""
    result = _unwrap(use_case.execute(user_id))
    return DeleteUserResponse(data=DeleteUserItem(success=result.success))

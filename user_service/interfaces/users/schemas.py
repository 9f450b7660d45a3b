"""
Pydantic schemas for users API request/response validation.

These schemas enforce input validation and define the API contract.
Request strings are stripped before length and pattern checks.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from user_service.domain.users.entities import NAME_MAX_LEN
from user_service.domain.users.value_objects import EMAIL_MAX_LEN, EMAIL_PATTERN

EMAIL_DESCRIPTION = "Email address, unique across users"
NAME_DESCRIPTION = "Display name (1-100 characters)"


class CreateUserRequest(BaseModel):
    """Request schema for creating a user.

    Attributes:
        email: Email address matching ``local@domain.tld``, at most 255 chars.
        name: Display name, 1-100 chars after trimming.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(
        ...,
        max_length=EMAIL_MAX_LEN,
        pattern=EMAIL_PATTERN,
        description=EMAIL_DESCRIPTION,
        examples=["john.doe@example.com"],
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=NAME_MAX_LEN,
        description=NAME_DESCRIPTION,
        examples=["John Doe"],
    )


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user. Omitted fields are left unchanged."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=NAME_MAX_LEN,
        description=NAME_DESCRIPTION,
    )


class UserItem(BaseModel):
    """A user as exposed over HTTP (camelCase timestamps)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    name: str
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")


class UserResponse(BaseModel):
    """Envelope for a single user."""

    data: UserItem


class UsersListResponse(BaseModel):
    """Envelope for a list of users."""

    data: list[UserItem]


class DeleteUserItem(BaseModel):
    """Outcome of a delete."""

    success: bool


class DeleteUserResponse(BaseModel):
    """Envelope for a delete outcome."""

    data: DeleteUserItem

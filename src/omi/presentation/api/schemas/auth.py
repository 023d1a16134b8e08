"""Authentication schemas for request/response models.

Emails are plain strings here; the identity domain validates and
normalizes them so malformed addresses answer 400 like other domain
validation failures.
"""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from omi.presentation.api.schemas.common import CamelModel
from omi_identity import PublicUser


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    email: str = Field(..., description="User's email address")
    password: str = Field(..., description="Password (at least 8 characters)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., description="Age in years (13-120)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Secret123!",
                "firstName": "Ada",
                "lastName": "Lovelace",
                "age": 25,
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Secret123!",
            },
        },
    )


class ForgotPasswordRequest(CamelModel):
    """Request schema for requesting a password reset email."""

    email: str


class ResetPasswordRequest(CamelModel):
    """Request schema for redeeming a password reset token."""

    token: str = Field(..., min_length=1)
    new_password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "3f1c...e9a0",
                "newPassword": "NewSecret123!",
            },
        },
    )


class UpdateProfileRequest(CamelModel):
    """Partial profile update; omitted fields keep their value."""

    email: str | None = None
    password: str | None = Field(default=None, description="New password")
    current_password: str | None = Field(
        default=None,
        description="Required when changing the password",
    )
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    age: int | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Ada",
                "password": "NewSecret123!",
                "currentPassword": "Secret123!",
            },
        },
    )


class DeleteAccountRequest(CamelModel):
    """Password confirmation for account deletion."""

    password: str


class UserResponse(CamelModel):
    """Public view of a user account. Never carries secrets."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_public_user(cls, user: PublicUser) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(CamelModel):
    """Response schema for register and login."""

    user: UserResponse
    token: str = Field(..., description="Bearer access token")


class ForgotPasswordResponse(CamelModel):
    """Constant acknowledgement; ``token`` only appears outside production."""

    message: str
    token: str | None = None

"""Pydantic schemas for API request/response models."""

from omi.presentation.api.schemas.auth import (
    AuthResponse,
    DeleteAccountRequest,
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UpdateProfileRequest,
    UserResponse,
)
from omi.presentation.api.schemas.comments import (
    CommentCreateRequest,
    CommentResponse,
    CommentUpdateRequest,
)
from omi.presentation.api.schemas.common import (
    AuthorResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from omi.presentation.api.schemas.favorites import (
    FavoriteCreateRequest,
    FavoriteResponse,
    IsFavoriteResponse,
)
from omi.presentation.api.schemas.ratings import (
    RatingRequest,
    RatingResponse,
    RatingStatsResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "DeleteAccountRequest",
    "ForgotPasswordRequest",
    "ForgotPasswordResponse",
    "LoginRequest",
    "RegisterRequest",
    "ResetPasswordRequest",
    "UpdateProfileRequest",
    "UserResponse",
    # Comments
    "CommentCreateRequest",
    "CommentResponse",
    "CommentUpdateRequest",
    # Common
    "AuthorResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    # Favorites
    "FavoriteCreateRequest",
    "FavoriteResponse",
    "IsFavoriteResponse",
    # Ratings
    "RatingRequest",
    "RatingResponse",
    "RatingStatsResponse",
]

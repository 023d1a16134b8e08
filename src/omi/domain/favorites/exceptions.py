"""Favorites domain exceptions."""

from omi.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidFavoriteError(ValidationError):
    """Raised when a favorite is missing its Pexels id or has an unknown media type."""


class FavoriteAlreadyExistsError(ConflictError):
    """Raised when the user already saved this Pexels item."""

    def __init__(self, pexels_id: str) -> None:
        super().__init__(
            message="Already added to favorites",
            code=ErrorCode.DUPLICATE_FAVORITE,
            details={"pexels_id": pexels_id},
        )


class FavoriteNotFoundError(EntityNotFoundError):
    """Raised when the user has no favorite for the given Pexels id."""

    def __init__(self, pexels_id: str) -> None:
        super().__init__(
            message="Favorite not found",
            code=ErrorCode.FAVORITE_NOT_FOUND,
            details={"pexels_id": pexels_id},
        )

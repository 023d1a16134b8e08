"""Ratings domain exceptions."""

from uuid import UUID

from omi.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidScoreError(ValidationError):
    """Raised when a score is not an integer between 1 and 5."""

    def __init__(self, score: object) -> None:
        super().__init__(
            message="Rating score must be between 1 and 5",
            code=ErrorCode.INVALID_SCORE,
            details={"score": score},
        )


class RatingNotFoundError(EntityNotFoundError):
    """Raised when a rating cannot be found."""

    def __init__(self, rating_id: UUID) -> None:
        super().__init__(
            message="Rating not found",
            code=ErrorCode.RATING_NOT_FOUND,
            details={"rating_id": str(rating_id)},
        )

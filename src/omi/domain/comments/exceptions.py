"""Comments domain exceptions."""

from uuid import UUID

from omi.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidCommentError(ValidationError):
    """Raised when comment content is empty or too long after trimming."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_COMMENT)


class CommentNotFoundError(EntityNotFoundError):
    """Raised when a comment cannot be found."""

    def __init__(self, comment_id: UUID) -> None:
        super().__init__(
            message="Comment not found",
            code=ErrorCode.COMMENT_NOT_FOUND,
            details={"comment_id": str(comment_id)},
        )

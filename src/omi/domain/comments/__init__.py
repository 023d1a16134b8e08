"""Comments domain - user comments on videos."""

from omi.domain.comments.entities import MAX_CONTENT_LENGTH, Comment, clean_content
from omi.domain.comments.exceptions import CommentNotFoundError, InvalidCommentError
from omi.domain.comments.repositories import CommentRepository

__all__ = [
    "MAX_CONTENT_LENGTH",
    "Comment",
    "CommentNotFoundError",
    "CommentRepository",
    "InvalidCommentError",
    "clean_content",
]

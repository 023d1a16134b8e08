from omi.domain.comments.repositories.comment_repository import CommentRepository

__all__ = ["CommentRepository"]

from omi.domain.comments.entities.comment import (
    MAX_CONTENT_LENGTH,
    Comment,
    clean_content,
)

__all__ = ["MAX_CONTENT_LENGTH", "Comment", "clean_content"]

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.comments import (
    Comment,
    CommentNotFoundError,
    CommentRepository,
    clean_content,
)
from omi.domain.shared.ownership import ensure_owner

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class UpdateCommentCommand:
    """Replace the content of a comment owned by the caller."""

    def __init__(self, comment_repository: CommentRepository):
        self._comment_repo = comment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCommentCommand:
        return cls(comment_repository=factory.comment_repository())

    async def execute(self, comment_id: UUID, user_id: UUID, content: str) -> Comment:
        # Content is checked before the lookup so bad input never costs a query
        content = clean_content(content)

        comment = await self._comment_repo.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)

        ensure_owner(comment.user_id, user_id, action="update", resource_name="comments")

        comment.edit(content)
        return await self._comment_repo.update(comment)

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.comments import CommentNotFoundError, CommentRepository
from omi.domain.shared.ownership import ensure_owner

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class DeleteCommentCommand:
    """Delete a comment owned by the caller."""

    def __init__(self, comment_repository: CommentRepository):
        self._comment_repo = comment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCommentCommand:
        return cls(comment_repository=factory.comment_repository())

    async def execute(self, comment_id: UUID, user_id: UUID) -> None:
        comment = await self._comment_repo.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)

        ensure_owner(comment.user_id, user_id, action="delete", resource_name="comments")

        await self._comment_repo.delete(comment_id)

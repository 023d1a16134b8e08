from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.comments import Comment, CommentRepository

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AddCommentCommand:
    """Post a comment on a video."""

    def __init__(self, comment_repository: CommentRepository):
        self._comment_repo = comment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddCommentCommand:
        return cls(comment_repository=factory.comment_repository())

    async def execute(self, user_id: UUID, video_link: str, content: str) -> Comment:
        comment = Comment(user_id=user_id, video_link=video_link, content=content)
        saved = await self._comment_repo.add(comment)
        logger.info("Comment added: id=%s user=%s", saved.id, user_id)
        return saved

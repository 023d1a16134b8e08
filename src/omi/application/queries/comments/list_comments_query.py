from __future__ import annotations

from typing import TYPE_CHECKING

from omi.domain.comments import Comment, CommentRepository
from omi.domain.shared.video_link import normalize_video_link

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class ListCommentsQuery:
    """All comments on a video, newest first."""

    def __init__(self, comment_repository: CommentRepository):
        self._comment_repo = comment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCommentsQuery:
        return cls(comment_repository=factory.comment_repository())

    async def execute(self, video_link: str) -> list[Comment]:
        return await self._comment_repo.list_by_video(normalize_video_link(video_link))

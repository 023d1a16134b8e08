from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.ratings import Rating, RatingRepository
from omi.domain.shared.video_link import normalize_video_link

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class GetUserRatingQuery:
    """The caller's rating for a video, or None if they have not rated it."""

    def __init__(self, rating_repository: RatingRepository):
        self._rating_repo = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetUserRatingQuery:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, user_id: UUID, video_link: str) -> Rating | None:
        return await self._rating_repo.find_by_user_and_video(
            user_id,
            normalize_video_link(video_link),
        )

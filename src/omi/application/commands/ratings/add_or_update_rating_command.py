"""Submit or replace the caller's rating for a video."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.ratings import Rating, RatingRepository, validate_score
from omi.domain.shared.video_link import normalize_video_link

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AddOrUpdateRatingCommand:
    """Upsert a rating keyed by ``(user_id, video_link)``. Last write wins."""

    def __init__(self, rating_repository: RatingRepository):
        self._rating_repo = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddOrUpdateRatingCommand:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, user_id: UUID, video_link: str, score: int) -> Rating:
        video_link = normalize_video_link(video_link)
        score = validate_score(score)

        rating = await self._rating_repo.upsert(user_id, video_link, score)
        logger.info("Rating saved: user=%s score=%d", user_id, score)
        return rating

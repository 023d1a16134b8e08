"""Rating statistics for a video."""

from __future__ import annotations

from typing import TYPE_CHECKING

from omi.domain.ratings import RatingRepository, RatingStatisticsService, RatingStats
from omi.domain.shared.video_link import normalize_video_link

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class GetRatingStatsQuery:
    """Average, total and 1..5 distribution of a video's ratings."""

    def __init__(
        self,
        rating_repository: RatingRepository,
        statistics_service: RatingStatisticsService | None = None,
    ):
        self._rating_repo = rating_repository
        self._statistics = statistics_service or RatingStatisticsService()

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetRatingStatsQuery:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, video_link: str) -> RatingStats:
        video_link = normalize_video_link(video_link)
        scores = await self._rating_repo.list_scores_for_video(video_link)
        return self._statistics.compute(scores)

from omi.domain.ratings.services.rating_statistics_service import (
    RatingStatisticsService,
)

__all__ = ["RatingStatisticsService"]

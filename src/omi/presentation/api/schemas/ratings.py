"""Rating schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from omi.domain.ratings import Rating, RatingStats
from omi.presentation.api.schemas.common import AuthorResponse, CamelModel


class RatingRequest(CamelModel):
    """Request schema for rating a video (creates or replaces)."""

    video_link: str = Field(..., description="Link of the rated video")
    score: int = Field(..., description="Star rating from 1 to 5")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "videoLink": "https://www.pexels.com/video/857195/",
                "score": 4,
            },
        },
    )


class RatingResponse(CamelModel):
    id: UUID
    user_id: UUID
    video_link: str
    score: int
    created_at: datetime
    updated_at: datetime
    user: AuthorResponse | None = None

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingResponse":
        author = rating.author
        return cls(
            id=rating.id,
            user_id=rating.user_id,
            video_link=rating.video_link,
            score=rating.score,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
            user=(
                AuthorResponse(
                    first_name=author.first_name,
                    last_name=author.last_name,
                    email=author.email,
                )
                if author
                else None
            ),
        )


class RatingStatsResponse(CamelModel):
    """Aggregate of all ratings for one video."""

    average_rating: float
    total_ratings: int
    distribution: dict[int, int]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "averageRating": 3.6,
                "totalRatings": 5,
                "distribution": {"1": 1, "2": 0, "3": 1, "4": 1, "5": 2},
            },
        },
    )

    @classmethod
    def from_stats(cls, stats: RatingStats) -> "RatingStatsResponse":
        return cls(
            average_rating=stats.average_rating,
            total_ratings=stats.total_ratings,
            distribution=dict(stats.distribution),
        )

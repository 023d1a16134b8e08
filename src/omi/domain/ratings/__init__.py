"""Ratings domain - 1 to 5 star scores per user and video."""

from omi.domain.ratings.entities import Rating, validate_score
from omi.domain.ratings.exceptions import InvalidScoreError, RatingNotFoundError
from omi.domain.ratings.repositories import RatingRepository
from omi.domain.ratings.services import RatingStatisticsService
from omi.domain.ratings.value_objects import MAX_SCORE, MIN_SCORE, RatingStats

__all__ = [
    "MAX_SCORE",
    "MIN_SCORE",
    "InvalidScoreError",
    "Rating",
    "RatingNotFoundError",
    "RatingRepository",
    "RatingStatisticsService",
    "RatingStats",
    "validate_score",
]

from omi.domain.ratings.value_objects.rating_stats import (
    MAX_SCORE,
    MIN_SCORE,
    RatingStats,
)

__all__ = ["MAX_SCORE", "MIN_SCORE", "RatingStats"]

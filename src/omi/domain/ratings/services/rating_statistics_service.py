"""Rating statistics aggregation."""

from typing import Iterable

from omi.domain.ratings.value_objects import MAX_SCORE, MIN_SCORE, RatingStats


class RatingStatisticsService:
    """Compute average and distribution for a video's scores."""

    AVERAGE_PRECISION = 2

    @classmethod
    def compute(cls, scores: Iterable[int]) -> RatingStats:
        """Aggregate ``scores`` in a single pass.

        Parameters
        ----------
        scores
            Individual scores, each between 1 and 5

        Returns
        -------
        RatingStats with the arithmetic mean rounded to two decimals.
        No scores yield average 0, total 0 and an all-zero distribution.
        """
        distribution = {score: 0 for score in range(MIN_SCORE, MAX_SCORE + 1)}
        total = 0
        score_sum = 0

        for score in scores:
            if score not in distribution:
                msg = f"Score out of range: {score}"
                raise ValueError(msg)
            distribution[score] += 1
            total += 1
            score_sum += score

        if total == 0:
            return RatingStats.empty()

        return RatingStats(
            average_rating=round(score_sum / total, cls.AVERAGE_PRECISION),
            total_ratings=total,
            distribution=distribution,
        )

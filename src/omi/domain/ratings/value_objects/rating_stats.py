from dataclasses import dataclass, field

MIN_SCORE = 1
MAX_SCORE = 5


def _empty_distribution() -> dict[int, int]:
    return {score: 0 for score in range(MIN_SCORE, MAX_SCORE + 1)}


@dataclass(frozen=True)
class RatingStats:
    """Aggregate view of all ratings for one video.

    ``distribution`` always has exactly the keys 1..5.
    """

    average_rating: float = 0.0
    total_ratings: int = 0
    distribution: dict[int, int] = field(default_factory=_empty_distribution)

    @classmethod
    def empty(cls) -> "RatingStats":
        return cls()

from omi.domain.ratings.repositories.rating_repository import RatingRepository

__all__ = ["RatingRepository"]

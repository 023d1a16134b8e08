from omi.domain.ratings.entities.rating import Rating, validate_score

__all__ = ["Rating", "validate_score"]

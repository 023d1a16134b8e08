"""SQLAlchemy models for persistence layer."""

from omi.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from omi.infrastructure.persistence.sqlalchemy.models.comment_model import CommentModel
from omi.infrastructure.persistence.sqlalchemy.models.favorite_model import (
    FavoriteModel,
)
from omi.infrastructure.persistence.sqlalchemy.models.rating_model import RatingModel

__all__ = [
    "Base",
    "CommentModel",
    "FavoriteModel",
    "RatingModel",
    "TimestampMixin",
]

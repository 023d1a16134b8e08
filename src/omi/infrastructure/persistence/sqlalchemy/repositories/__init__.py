"""SQLAlchemy repository implementations."""

from omi.infrastructure.persistence.sqlalchemy.repositories.comment_repository import (  # noqa: E501
    CommentRepositorySQLAlchemy,
)
from omi.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from omi.infrastructure.persistence.sqlalchemy.repositories.favorite_repository import (  # noqa: E501
    FavoriteRepositorySQLAlchemy,
)
from omi.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # noqa: E501
    RatingRepositorySQLAlchemy,
)

__all__ = [
    "CommentRepositorySQLAlchemy",
    "FavoriteRepositorySQLAlchemy",
    "RatingRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
]

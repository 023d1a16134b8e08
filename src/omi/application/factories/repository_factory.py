"""Repository factory protocol for application layer."""

from typing import Any, Protocol

from omi.domain.comments import CommentRepository
from omi.domain.favorites import FavoriteRepository
from omi.domain.ratings import RatingRepository
from omi_identity.domain.user.repositories import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        Typed as `Any` so the application layer does not depend on a
        specific database implementation. The presentation layer uses it
        for commit/rollback.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def favorite_repository(self) -> FavoriteRepository:
        """Get favorite repository."""
        ...

    def rating_repository(self) -> RatingRepository:
        """Get rating repository."""
        ...

    def comment_repository(self) -> CommentRepository:
        """Get comment repository."""
        ...

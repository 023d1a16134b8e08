"""SQLAlchemy repository factory bound to one request's session."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from omi.infrastructure.persistence.sqlalchemy.repositories.comment_repository import (  # noqa: E501
    CommentRepositorySQLAlchemy,
)
from omi.infrastructure.persistence.sqlalchemy.repositories.favorite_repository import (  # noqa: E501
    FavoriteRepositorySQLAlchemy,
)
from omi.infrastructure.persistence.sqlalchemy.repositories.rating_repository import (  # noqa: E501
    RatingRepositorySQLAlchemy,
)
from omi_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._favorite_repo: FavoriteRepositorySQLAlchemy | None = None
        self._rating_repo: RatingRepositorySQLAlchemy | None = None
        self._comment_repo: CommentRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def favorite_repository(self) -> FavoriteRepositorySQLAlchemy:
        if self._favorite_repo is None:
            self._favorite_repo = FavoriteRepositorySQLAlchemy(self._session)
        return self._favorite_repo

    def rating_repository(self) -> RatingRepositorySQLAlchemy:
        if self._rating_repo is None:
            self._rating_repo = RatingRepositorySQLAlchemy(self._session)
        return self._rating_repo

    def comment_repository(self) -> CommentRepositorySQLAlchemy:
        if self._comment_repo is None:
            self._comment_repo = CommentRepositorySQLAlchemy(self._session)
        return self._comment_repo

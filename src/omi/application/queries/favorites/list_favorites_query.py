from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.favorites import Favorite, FavoriteRepository

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class ListFavoritesQuery:
    """List the caller's favorites, newest first."""

    def __init__(self, favorite_repository: FavoriteRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListFavoritesQuery:
        return cls(favorite_repository=factory.favorite_repository())

    async def execute(self, user_id: UUID) -> list[Favorite]:
        return await self._favorite_repo.list_by_user(user_id)

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.favorites import FavoriteRepository

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class IsFavoriteQuery:
    """Tell whether the caller saved a given Pexels item."""

    def __init__(self, favorite_repository: FavoriteRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> IsFavoriteQuery:
        return cls(favorite_repository=factory.favorite_repository())

    async def execute(self, user_id: UUID, pexels_id: str) -> bool:
        return await self._favorite_repo.exists(user_id, pexels_id)

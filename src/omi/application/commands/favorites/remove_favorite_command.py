"""Remove a Pexels item from the caller's favorites."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.favorites import FavoriteNotFoundError, FavoriteRepository

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class RemoveFavoriteCommand:
    """Delete a favorite. Scoped to the caller, so no ownership lookup is needed."""

    def __init__(self, favorite_repository: FavoriteRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> RemoveFavoriteCommand:
        return cls(favorite_repository=factory.favorite_repository())

    async def execute(self, user_id: UUID, pexels_id: str) -> None:
        if not await self._favorite_repo.remove(user_id, pexels_id):
            raise FavoriteNotFoundError(pexels_id)

"""Add a Pexels item to the caller's favorites."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union
from uuid import UUID

from omi.domain.favorites import (
    Favorite,
    FavoriteAlreadyExistsError,
    FavoriteRepository,
    MediaType,
)

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class AddFavoriteCommand:
    """Save a favorite unless the user already has it."""

    def __init__(self, favorite_repository: FavoriteRepository):
        self._favorite_repo = favorite_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> AddFavoriteCommand:
        return cls(favorite_repository=factory.favorite_repository())

    async def execute(
        self,
        user_id: UUID,
        pexels_id: str,
        media_type: Union[str, MediaType],
    ) -> Favorite:
        favorite = Favorite(user_id=user_id, pexels_id=pexels_id, media_type=media_type)

        # Fast path; the unique constraint still guards concurrent adds
        if await self._favorite_repo.exists(user_id, favorite.pexels_id):
            raise FavoriteAlreadyExistsError(favorite.pexels_id)

        saved = await self._favorite_repo.add(favorite)
        logger.info("Favorite added: user=%s pexels_id=%s", user_id, saved.pexels_id)
        return saved

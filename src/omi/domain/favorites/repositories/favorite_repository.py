"""Repository interface for favorites."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from omi.domain.favorites.entities import Favorite


class FavoriteRepository(ABC):
    """Repository interface for persisting and retrieving favorites."""

    @abstractmethod
    async def add(self, favorite: Favorite) -> Favorite:
        """
        Insert a favorite.

        Raises
        ------
        FavoriteAlreadyExistsError
            If ``(user_id, pexels_id)`` is already stored
        """

    @abstractmethod
    async def find(self, user_id: UUID, pexels_id: str) -> Optional[Favorite]:
        """Find a user's favorite by Pexels id."""

    @abstractmethod
    async def exists(self, user_id: UUID, pexels_id: str) -> bool:
        """Check whether the user saved the given Pexels item."""

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> List[Favorite]:
        """List a user's favorites, newest first."""

    @abstractmethod
    async def remove(self, user_id: UUID, pexels_id: str) -> bool:
        """
        Remove a user's favorite.

        Returns
        -------
        True if deleted, False if not found
        """

"""Repository interface for ratings."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from omi.domain.ratings.entities import Rating


class RatingRepository(ABC):
    """Repository interface for persisting and retrieving ratings."""

    @abstractmethod
    async def upsert(self, user_id: UUID, video_link: str, score: int) -> Rating:
        """
        Insert or replace the user's rating for a video in one statement.

        Concurrent calls for the same ``(user_id, video_link)`` leave exactly
        one row; the last write wins.
        """

    @abstractmethod
    async def find_by_id(self, rating_id: UUID) -> Optional[Rating]:
        """Find a rating by ID."""

    @abstractmethod
    async def find_by_user_and_video(
        self,
        user_id: UUID,
        video_link: str,
    ) -> Optional[Rating]:
        """Find the user's rating for a video."""

    @abstractmethod
    async def list_scores_for_video(self, video_link: str) -> List[int]:
        """Return every score given to a video."""

    @abstractmethod
    async def delete(self, rating_id: UUID) -> bool:
        """
        Delete a rating.

        Returns
        -------
        True if deleted, False if not found
        """

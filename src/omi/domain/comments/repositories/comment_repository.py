"""Repository interface for comments."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from omi.domain.comments.entities import Comment


class CommentRepository(ABC):
    """Repository interface for persisting and retrieving comments."""

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its author filled in."""

    @abstractmethod
    async def update(self, comment: Comment) -> Comment:
        """Persist the content of an existing comment."""

    @abstractmethod
    async def find_by_id(self, comment_id: UUID) -> Optional[Comment]:
        """Find a comment by ID."""

    @abstractmethod
    async def list_by_video(self, video_link: str) -> List[Comment]:
        """List a video's comments, newest first."""

    @abstractmethod
    async def delete(self, comment_id: UUID) -> bool:
        """
        Delete a comment.

        Returns
        -------
        True if deleted, False if not found
        """

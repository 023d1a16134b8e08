from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.ratings import RatingNotFoundError, RatingRepository
from omi.domain.shared.ownership import ensure_owner

if TYPE_CHECKING:
    from omi.application.factories import RepositoryFactory


class DeleteRatingCommand:
    """Delete a rating owned by the caller."""

    def __init__(self, rating_repository: RatingRepository):
        self._rating_repo = rating_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteRatingCommand:
        return cls(rating_repository=factory.rating_repository())

    async def execute(self, rating_id: UUID, user_id: UUID) -> None:
        rating = await self._rating_repo.find_by_id(rating_id)
        if rating is None:
            raise RatingNotFoundError(rating_id)

        ensure_owner(rating.user_id, user_id, action="delete", resource_name="ratings")

        await self._rating_repo.delete(rating_id)

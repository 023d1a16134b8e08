"""SQLAlchemy implementation of FavoriteRepository."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from omi.domain.favorites import (
    Favorite,
    FavoriteAlreadyExistsError,
    FavoriteRepository,
)
from omi.infrastructure.persistence.sqlalchemy.models import FavoriteModel
from omi.infrastructure.persistence.sqlalchemy.repositories._utils import as_utc

logger = logging.getLogger(__name__)


class FavoriteRepositorySQLAlchemy(FavoriteRepository):
    """SQLAlchemy implementation of FavoriteRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(self, favorite: Favorite) -> Favorite:
        self._session.add(
            FavoriteModel(
                id=favorite.id,
                user_id=favorite.user_id,
                pexels_id=favorite.pexels_id,
                media_type=favorite.media_type.value,
                created_at=favorite.created_at,
            ),
        )
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "pexels_id" in str(e.orig).lower():
                raise FavoriteAlreadyExistsError(favorite.pexels_id) from e
            raise
        return favorite

    async def find(self, user_id: UUID, pexels_id: str) -> Optional[Favorite]:
        stmt = select(FavoriteModel).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.pexels_id == pexels_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._model_to_domain(model)

    async def exists(self, user_id: UUID, pexels_id: str) -> bool:
        stmt = select(FavoriteModel.id).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.pexels_id == pexels_id,
        )
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def list_by_user(self, user_id: UUID) -> List[Favorite]:
        stmt = (
            select(FavoriteModel)
            .where(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._model_to_domain(model) for model in result.scalars().all()]

    async def remove(self, user_id: UUID, pexels_id: str) -> bool:
        stmt = delete(FavoriteModel).where(
            FavoriteModel.user_id == user_id,
            FavoriteModel.pexels_id == pexels_id,
        )
        result = await self._session.execute(stmt)
        deleted = result.rowcount > 0
        if deleted:
            logger.info("Favorite removed: user=%s pexels_id=%s", user_id, pexels_id)
        return deleted

    def _model_to_domain(self, model: FavoriteModel) -> Favorite:
        return Favorite(
            id=model.id,
            user_id=model.user_id,
            pexels_id=model.pexels_id,
            media_type=model.media_type,
            created_at=as_utc(model.created_at),
        )

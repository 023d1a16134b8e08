"""SQLAlchemy implementation of RatingRepository."""

from typing import Any, List, Optional
from uuid import UUID, uuid4

from sqlalchemy import Row, Select, delete, select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from omi.domain.ratings import Rating, RatingRepository
from omi.domain.shared.time import utc_now
from omi.infrastructure.persistence.sqlalchemy.models import RatingModel
from omi.infrastructure.persistence.sqlalchemy.repositories._utils import (
    as_utc,
    author_from_row,
)
from omi_identity.infrastructure.persistence.sqlalchemy.models import UserModel

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class RatingRepositorySQLAlchemy(RatingRepository):
    """SQLAlchemy implementation of RatingRepository.

    The upsert relies on ``INSERT ... ON CONFLICT DO UPDATE`` and therefore
    supports the PostgreSQL and SQLite dialects.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _select_with_author(self) -> Select[Any]:
        return select(
            RatingModel,
            UserModel.first_name,
            UserModel.last_name,
            UserModel.email,
        ).join(UserModel, UserModel.id == RatingModel.user_id)

    async def upsert(self, user_id: UUID, video_link: str, score: int) -> Rating:
        dialect = self._session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            msg = f"Rating upsert is not supported for dialect {dialect!r}"
            raise NotImplementedError(msg)

        now = utc_now()
        stmt = insert(RatingModel).values(
            id=uuid4(),
            user_id=user_id,
            video_link=video_link,
            score=score,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "video_link"],
            set_={
                "score": stmt.excluded.score,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self._session.execute(stmt)

        rating = await self.find_by_user_and_video(user_id, video_link)
        if rating is None:
            msg = f"Rating for user {user_id} vanished after upsert"
            raise RuntimeError(msg)
        return rating

    async def find_by_id(self, rating_id: UUID) -> Optional[Rating]:
        stmt = self._select_with_author().where(RatingModel.id == rating_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return self._row_to_domain(row)

    async def find_by_user_and_video(
        self,
        user_id: UUID,
        video_link: str,
    ) -> Optional[Rating]:
        stmt = (
            self._select_with_author()
            .where(
                RatingModel.user_id == user_id,
                RatingModel.video_link == video_link,
            )
            # The upsert bypasses the identity map
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return self._row_to_domain(row)

    async def list_scores_for_video(self, video_link: str) -> List[int]:
        stmt = select(RatingModel.score).where(RatingModel.video_link == video_link)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def delete(self, rating_id: UUID) -> bool:
        stmt = delete(RatingModel).where(RatingModel.id == rating_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    def _row_to_domain(self, row: Row[Any]) -> Rating:
        model, first_name, last_name, email = row
        return Rating(
            id=model.id,
            user_id=model.user_id,
            video_link=model.video_link,
            score=model.score,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            author=author_from_row(first_name, last_name, email),
        )

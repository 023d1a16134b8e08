"""SQLAlchemy implementation of CommentRepository."""

from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import Row, Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from omi.domain.comments import Comment, CommentNotFoundError, CommentRepository
from omi.infrastructure.persistence.sqlalchemy.models import CommentModel
from omi.infrastructure.persistence.sqlalchemy.repositories._utils import (
    as_utc,
    author_from_row,
)
from omi_identity.infrastructure.persistence.sqlalchemy.models import UserModel


class CommentRepositorySQLAlchemy(CommentRepository):
    """SQLAlchemy implementation of CommentRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _select_with_author(self) -> Select[Any]:
        return select(
            CommentModel,
            UserModel.first_name,
            UserModel.last_name,
            UserModel.email,
        ).join(UserModel, UserModel.id == CommentModel.user_id)

    async def add(self, comment: Comment) -> Comment:
        self._session.add(
            CommentModel(
                id=comment.id,
                user_id=comment.user_id,
                video_link=comment.video_link,
                content=comment.content,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
            ),
        )
        await self._session.flush()
        return await self._get(comment.id)

    async def update(self, comment: Comment) -> Comment:
        model = await self._session.get(CommentModel, comment.id)
        if model is None:
            raise CommentNotFoundError(comment.id)

        model.content = comment.content
        model.updated_at = comment.updated_at
        await self._session.flush()
        return await self._get(comment.id)

    async def find_by_id(self, comment_id: UUID) -> Optional[Comment]:
        stmt = self._select_with_author().where(CommentModel.id == comment_id)
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return self._row_to_domain(row)

    async def list_by_video(self, video_link: str) -> List[Comment]:
        stmt = (
            self._select_with_author()
            .where(CommentModel.video_link == video_link)
            .order_by(CommentModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._row_to_domain(row) for row in result.all()]

    async def delete(self, comment_id: UUID) -> bool:
        stmt = delete(CommentModel).where(CommentModel.id == comment_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def _get(self, comment_id: UUID) -> Comment:
        comment = await self.find_by_id(comment_id)
        if comment is None:
            raise CommentNotFoundError(comment_id)
        return comment

    def _row_to_domain(self, row: Row[Any]) -> Comment:
        model, first_name, last_name, email = row
        return Comment(
            id=model.id,
            user_id=model.user_id,
            video_link=model.video_link,
            content=model.content,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            author=author_from_row(first_name, last_name, email),
        )

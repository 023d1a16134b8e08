"""SQLAlchemy model for Comment entities."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from omi.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class CommentModel(Base, TimestampMixin):
    __tablename__ = "comments"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_link: Mapped[str] = mapped_column(String(2048), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<CommentModel(id={self.id}, user_id={self.user_id})>"

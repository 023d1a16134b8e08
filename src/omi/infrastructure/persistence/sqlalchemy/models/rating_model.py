"""SQLAlchemy model for Rating entities."""

from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from omi.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class RatingModel(Base, TimestampMixin):
    """One row per ``(user_id, video_link)``; written through an upsert."""

    __tablename__ = "ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "video_link"),
        CheckConstraint("score BETWEEN 1 AND 5", name="ck_ratings_score_range"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_link: Mapped[str] = mapped_column(String(2048), nullable=False, index=True)
    score: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<RatingModel(id={self.id}, score={self.score})>"

"""SQLAlchemy model for Favorite entities."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from omi.domain.shared.time import utc_now
from omi.infrastructure.persistence.sqlalchemy.models.base import Base


class FavoriteModel(Base):
    """One row per ``(user_id, pexels_id)``."""

    __tablename__ = "favorites"
    __table_args__ = (UniqueConstraint("user_id", "pexels_id"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    pexels_id: Mapped[str] = mapped_column(String(64), nullable=False)
    media_type: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<FavoriteModel(user_id={self.user_id}, pexels_id={self.pexels_id})>"

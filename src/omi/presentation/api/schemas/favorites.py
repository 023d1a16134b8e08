"""Favorite schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict, Field

from omi.domain.favorites import Favorite
from omi.presentation.api.schemas.common import CamelModel


class FavoriteCreateRequest(CamelModel):
    """Request schema for adding a favorite."""

    pexels_id: str = Field(..., description="Pexels photo or video id")
    media_type: str = Field(default="video", description="photo or video")

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "example": {"pexelsId": "857195", "mediaType": "video"},
        },
    )


class FavoriteResponse(CamelModel):
    id: UUID
    pexels_id: str
    media_type: str
    created_at: datetime

    @classmethod
    def from_entity(cls, favorite: Favorite) -> "FavoriteResponse":
        return cls(
            id=favorite.id,
            pexels_id=favorite.pexels_id,
            media_type=favorite.media_type.value,
            created_at=favorite.created_at,
        )


class IsFavoriteResponse(CamelModel):
    is_favorite: bool

"""Favorite entity: a Pexels photo or video saved by a user."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from omi.domain.favorites.exceptions import InvalidFavoriteError
from omi.domain.favorites.value_objects import MediaType
from omi.domain.shared.time import utc_now


class Favorite:
    """A user's bookmark of one Pexels item.

    At most one favorite exists per ``(user_id, pexels_id)``.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_id: UUID,
        pexels_id: str,
        media_type: Union[str, MediaType],
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._pexels_id = (pexels_id or "").strip()
        self._media_type = self._parse_media_type(media_type)
        self._created_at = created_at or utc_now()

        if not self._pexels_id:
            msg = "Pexels id is required"
            raise InvalidFavoriteError(msg, details={"field": "pexels_id"})

    @staticmethod
    def _parse_media_type(media_type: Union[str, MediaType]) -> MediaType:
        if isinstance(media_type, MediaType):
            return media_type
        try:
            return MediaType(media_type)
        except ValueError as e:
            msg = "Media type must be 'photo' or 'video'"
            raise InvalidFavoriteError(
                msg,
                details={"media_type": media_type},
            ) from e

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def pexels_id(self) -> str:
        return self._pexels_id

    @property
    def media_type(self) -> MediaType:
        return self._media_type

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Favorite):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Favorite(id={self._id}, user_id={self._user_id}, "
            f"pexels_id={self._pexels_id!r}, media_type={self._media_type.value})"
        )

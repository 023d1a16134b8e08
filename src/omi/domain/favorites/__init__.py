"""Favorites domain - Pexels photos and videos bookmarked by a user."""

from omi.domain.favorites.entities import Favorite
from omi.domain.favorites.exceptions import (
    FavoriteAlreadyExistsError,
    FavoriteNotFoundError,
    InvalidFavoriteError,
)
from omi.domain.favorites.repositories import FavoriteRepository
from omi.domain.favorites.value_objects import MediaType

__all__ = [
    "Favorite",
    "FavoriteAlreadyExistsError",
    "FavoriteNotFoundError",
    "FavoriteRepository",
    "InvalidFavoriteError",
    "MediaType",
]

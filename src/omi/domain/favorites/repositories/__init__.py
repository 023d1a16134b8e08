from omi.domain.favorites.repositories.favorite_repository import FavoriteRepository

__all__ = ["FavoriteRepository"]

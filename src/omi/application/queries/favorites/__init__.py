from omi.application.queries.favorites.is_favorite_query import IsFavoriteQuery
from omi.application.queries.favorites.list_favorites_query import ListFavoritesQuery

__all__ = ["IsFavoriteQuery", "ListFavoritesQuery"]

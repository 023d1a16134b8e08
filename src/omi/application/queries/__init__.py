"""Query layer - read-only operations."""

from omi.application.queries.comments import ListCommentsQuery
from omi.application.queries.favorites import IsFavoriteQuery, ListFavoritesQuery
from omi.application.queries.ratings import GetRatingStatsQuery, GetUserRatingQuery

__all__ = [
    "GetRatingStatsQuery",
    "GetUserRatingQuery",
    "IsFavoriteQuery",
    "ListCommentsQuery",
    "ListFavoritesQuery",
]

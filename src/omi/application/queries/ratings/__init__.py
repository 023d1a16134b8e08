from omi.application.queries.ratings.get_rating_stats_query import GetRatingStatsQuery
from omi.application.queries.ratings.get_user_rating_query import GetUserRatingQuery

__all__ = ["GetRatingStatsQuery", "GetUserRatingQuery"]

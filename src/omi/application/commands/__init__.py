"""Command layer - write operations that mutate state.

Commands represent user intentions to change system state. They validate
input, enforce ownership and delegate persistence to repositories.

Commands are organized by domain:
- favorites: bookmark and un-bookmark Pexels items
- ratings: upsert and delete star ratings
- comments: post, edit and delete comments
"""

from omi.application.commands.comments import (
    AddCommentCommand,
    DeleteCommentCommand,
    UpdateCommentCommand,
)
from omi.application.commands.favorites import (
    AddFavoriteCommand,
    RemoveFavoriteCommand,
)
from omi.application.commands.ratings import (
    AddOrUpdateRatingCommand,
    DeleteRatingCommand,
)

__all__ = [
    # Comments
    "AddCommentCommand",
    "DeleteCommentCommand",
    "UpdateCommentCommand",
    # Favorites
    "AddFavoriteCommand",
    "RemoveFavoriteCommand",
    # Ratings
    "AddOrUpdateRatingCommand",
    "DeleteRatingCommand",
]

from omi.application.commands.favorites.add_favorite_command import AddFavoriteCommand
from omi.application.commands.favorites.remove_favorite_command import (
    RemoveFavoriteCommand,
)

__all__ = ["AddFavoriteCommand", "RemoveFavoriteCommand"]

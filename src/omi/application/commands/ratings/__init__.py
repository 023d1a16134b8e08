from omi.application.commands.ratings.add_or_update_rating_command import (
    AddOrUpdateRatingCommand,
)
from omi.application.commands.ratings.delete_rating_command import DeleteRatingCommand

__all__ = ["AddOrUpdateRatingCommand", "DeleteRatingCommand"]

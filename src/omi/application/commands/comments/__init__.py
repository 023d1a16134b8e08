from omi.application.commands.comments.add_comment_command import AddCommentCommand
from omi.application.commands.comments.delete_comment_command import (
    DeleteCommentCommand,
)
from omi.application.commands.comments.update_comment_command import (
    UpdateCommentCommand,
)

__all__ = ["AddCommentCommand", "DeleteCommentCommand", "UpdateCommentCommand"]

from omi.application.queries.comments.list_comments_query import ListCommentsQuery

__all__ = ["ListCommentsQuery"]

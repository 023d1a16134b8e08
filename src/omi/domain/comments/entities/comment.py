"""Comment entity: free text a user leaves on a video."""

from datetime import datetime
from uuid import UUID, uuid4

from omi.domain.comments.exceptions import InvalidCommentError
from omi.domain.shared.resource_author import ResourceAuthor
from omi.domain.shared.time import utc_now
from omi.domain.shared.video_link import normalize_video_link

MAX_CONTENT_LENGTH = 1000


def clean_content(content: str | None) -> str:
    """Trim ``content`` and check its length is within 1..MAX_CONTENT_LENGTH."""
    trimmed = (content or "").strip()
    if not trimmed:
        msg = "Comment content cannot be empty"
        raise InvalidCommentError(msg)
    if len(trimmed) > MAX_CONTENT_LENGTH:
        msg = f"Comment content cannot exceed {MAX_CONTENT_LENGTH} characters"
        raise InvalidCommentError(msg)
    return trimmed


class Comment:
    """A comment on a video. Only its author may edit or delete it."""

    def __init__(  # noqa: PLR0913
        self,
        user_id: UUID,
        video_link: str,
        content: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        author: ResourceAuthor | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._video_link = normalize_video_link(video_link)
        self._content = clean_content(content)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self._author = author

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def video_link(self) -> str:
        return self._video_link

    @property
    def content(self) -> str:
        return self._content

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def author(self) -> ResourceAuthor | None:
        return self._author

    def edit(self, content: str) -> None:
        self._content = clean_content(content)
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Comment):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Comment(id={self._id}, user_id={self._user_id}, "
            f"video_link={self._video_link!r})"
        )

"""Rating entity: one user's 1-5 star score for a video."""

from datetime import datetime
from uuid import UUID, uuid4

from omi.domain.ratings.exceptions import InvalidScoreError
from omi.domain.ratings.value_objects import MAX_SCORE, MIN_SCORE
from omi.domain.shared.resource_author import ResourceAuthor
from omi.domain.shared.time import utc_now
from omi.domain.shared.video_link import normalize_video_link


def validate_score(score: object) -> int:
    """Return ``score`` if it is an int in 1..5, else raise InvalidScoreError."""
    # bool is an int subclass but never a valid score
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(score)
    if score < MIN_SCORE or score > MAX_SCORE:
        raise InvalidScoreError(score)
    return score


class Rating:
    """A user's score for a video.

    At most one rating exists per ``(user_id, video_link)``; submitting
    again replaces the score.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_id: UUID,
        video_link: str,
        score: int,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        author: ResourceAuthor | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._video_link = normalize_video_link(video_link)
        self._score = validate_score(score)
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
    def score(self) -> int:
        return self._score

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def author(self) -> ResourceAuthor | None:
        return self._author

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rating):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Rating(id={self._id}, user_id={self._user_id}, "
            f"video_link={self._video_link!r}, score={self._score})"
        )

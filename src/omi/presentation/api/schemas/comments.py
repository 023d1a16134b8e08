"""Comment schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import ConfigDict

from omi.domain.comments import Comment
from omi.presentation.api.schemas.common import AuthorResponse, CamelModel


class CommentCreateRequest(CamelModel):
    video_link: str
    content: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "videoLink": "https://www.pexels.com/video/857195/",
                "content": "Lovely light in this one.",
            },
        },
    )


class CommentUpdateRequest(CamelModel):
    content: str


class CommentResponse(CamelModel):
    id: UUID
    user_id: UUID
    video_link: str
    content: str
    created_at: datetime
    updated_at: datetime
    user: AuthorResponse | None = None

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        author = comment.author
        return cls(
            id=comment.id,
            user_id=comment.user_id,
            video_link=comment.video_link,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            user=(
                AuthorResponse(
                    first_name=author.first_name,
                    last_name=author.last_name,
                    email=author.email,
                )
                if author
                else None
            ),
        )

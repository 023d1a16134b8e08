"""Comments router: public listing, owner-only edit and delete."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query, status

from omi.application.commands import (
    AddCommentCommand,
    DeleteCommentCommand,
    UpdateCommentCommand,
)
from omi.application.queries import ListCommentsQuery
from omi.presentation.api.dependencies import CurrentUser, RepoFactory
from omi.presentation.api.schemas.comments import (
    CommentCreateRequest,
    CommentResponse,
    CommentUpdateRequest,
)
from omi.presentation.api.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_OWNERSHIP_RESPONSES = {
    403: {"description": "Comment belongs to another user"},
    404: {"description": "Comment not found"},
}


@router.get(
    "/video",
    summary="List comments on a video",
    responses={200: {"description": "Comments with their authors, newest first"}},
)
async def list_comments(
    factory: RepoFactory,
    video_link: str = Query(..., alias="videoLink"),
) -> list[CommentResponse]:
    query = ListCommentsQuery.from_factory(factory)
    comments = await query.execute(video_link)
    return [CommentResponse.from_entity(c) for c in comments]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a video",
    responses={
        201: {"description": "Comment created"},
        400: {"description": "Empty or too long content, or missing video link"},
    },
)
async def add_comment(
    request: CommentCreateRequest,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> CommentResponse:
    command = AddCommentCommand.from_factory(factory)

    try:
        comment = await command.execute(
            user_id=current_user.user_id,
            video_link=request.video_link,
            content=request.content,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CommentResponse.from_entity(comment)


@router.put(
    "/{comment_id}",
    summary="Edit a comment",
    responses={200: {"description": "Comment updated"}, **_OWNERSHIP_RESPONSES},
)
async def update_comment(
    comment_id: UUID,
    request: CommentUpdateRequest,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> CommentResponse:
    command = UpdateCommentCommand.from_factory(factory)

    try:
        comment = await command.execute(
            comment_id=comment_id,
            user_id=current_user.user_id,
            content=request.content,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CommentResponse.from_entity(comment)


@router.delete(
    "/{comment_id}",
    summary="Delete a comment",
    responses={200: {"description": "Comment deleted"}, **_OWNERSHIP_RESPONSES},
)
async def delete_comment(
    comment_id: UUID,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> MessageResponse:
    command = DeleteCommentCommand.from_factory(factory)

    try:
        await command.execute(comment_id=comment_id, user_id=current_user.user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Comment deleted successfully")

"""Ratings router: per-user star ratings and per-video statistics."""

import logging
from uuid import UUID

from fastapi import APIRouter, Query

from omi.application.commands import AddOrUpdateRatingCommand, DeleteRatingCommand
from omi.application.queries import GetRatingStatsQuery, GetUserRatingQuery
from omi.presentation.api.dependencies import CurrentUser, RepoFactory
from omi.presentation.api.schemas.common import MessageResponse
from omi.presentation.api.schemas.ratings import (
    RatingRequest,
    RatingResponse,
    RatingStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    summary="Rate a video",
    responses={
        200: {"description": "Rating created or replaced"},
        400: {"description": "Missing video link or score outside 1-5"},
    },
)
async def rate_video(
    request: RatingRequest,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> RatingResponse:
    """
    Create or replace the caller's rating for a video.

    A user has at most one rating per video; rating again overwrites it.
    """
    command = AddOrUpdateRatingCommand.from_factory(factory)

    try:
        rating = await command.execute(
            user_id=current_user.user_id,
            video_link=request.video_link,
            score=request.score,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return RatingResponse.from_entity(rating)


@router.get(
    "/stats",
    summary="Get rating statistics for a video",
)
async def get_rating_stats(
    factory: RepoFactory,
    video_link: str = Query(..., alias="videoLink"),
) -> RatingStatsResponse:
    """Average, count and 1-5 distribution. A video without ratings has all zeros."""
    query = GetRatingStatsQuery.from_factory(factory)
    stats = await query.execute(video_link)
    return RatingStatsResponse.from_stats(stats)


@router.get(
    "/user",
    summary="Get the caller's rating for a video",
    responses={200: {"description": "The rating, or null if not rated"}},
)
async def get_user_rating(
    current_user: CurrentUser,
    factory: RepoFactory,
    video_link: str = Query(..., alias="videoLink"),
) -> RatingResponse | None:
    query = GetUserRatingQuery.from_factory(factory)
    rating = await query.execute(current_user.user_id, video_link)
    return RatingResponse.from_entity(rating) if rating else None


@router.delete(
    "/{rating_id}",
    summary="Delete a rating",
    responses={
        200: {"description": "Rating deleted"},
        403: {"description": "Rating belongs to another user"},
        404: {"description": "Rating not found"},
    },
)
async def delete_rating(
    rating_id: UUID,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> MessageResponse:
    command = DeleteRatingCommand.from_factory(factory)

    try:
        await command.execute(rating_id=rating_id, user_id=current_user.user_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Rating deleted successfully")

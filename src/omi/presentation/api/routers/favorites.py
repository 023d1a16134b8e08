"""Favorites router for a user's bookmarked Pexels photos and videos."""

import logging

from fastapi import APIRouter, status

from omi.application.commands import AddFavoriteCommand, RemoveFavoriteCommand
from omi.application.queries import IsFavoriteQuery, ListFavoritesQuery
from omi.presentation.api.dependencies import CurrentUser, RepoFactory
from omi.presentation.api.schemas.common import MessageResponse
from omi.presentation.api.schemas.favorites import (
    FavoriteCreateRequest,
    FavoriteResponse,
    IsFavoriteResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List favorites",
    responses={200: {"description": "Current user's favorites, newest first"}},
)
async def list_favorites(
    current_user: CurrentUser,
    factory: RepoFactory,
) -> list[FavoriteResponse]:
    query = ListFavoritesQuery.from_factory(factory)
    favorites = await query.execute(current_user.user_id)
    return [FavoriteResponse.from_entity(f) for f in favorites]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Add a favorite",
    responses={
        201: {"description": "Favorite added"},
        400: {"description": "Missing pexels id or unknown media type"},
        409: {"description": "Already added to favorites"},
    },
)
async def add_favorite(
    request: FavoriteCreateRequest,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> FavoriteResponse:
    command = AddFavoriteCommand.from_factory(factory)

    try:
        favorite = await command.execute(
            user_id=current_user.user_id,
            pexels_id=request.pexels_id,
            media_type=request.media_type,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return FavoriteResponse.from_entity(favorite)


@router.get(
    "/{pexels_id}",
    summary="Check whether an item is a favorite",
)
async def is_favorite(
    pexels_id: str,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> IsFavoriteResponse:
    query = IsFavoriteQuery.from_factory(factory)
    return IsFavoriteResponse(
        is_favorite=await query.execute(current_user.user_id, pexels_id),
    )


@router.delete(
    "/{pexels_id}",
    summary="Remove a favorite",
    responses={
        200: {"description": "Favorite removed"},
        404: {"description": "Not in favorites"},
    },
)
async def remove_favorite(
    pexels_id: str,
    current_user: CurrentUser,
    factory: RepoFactory,
) -> MessageResponse:
    command = RemoveFavoriteCommand.from_factory(factory)

    try:
        await command.execute(current_user.user_id, pexels_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return MessageResponse(message="Removed from favorites")

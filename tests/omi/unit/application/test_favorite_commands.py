"""Unit tests for favorite commands and queries."""

from unittest.mock import AsyncMock

import pytest

from omi.application.commands import AddFavoriteCommand, RemoveFavoriteCommand
from omi.application.queries import IsFavoriteQuery, ListFavoritesQuery
from omi.domain.favorites import (
    FavoriteAlreadyExistsError,
    FavoriteNotFoundError,
    InvalidFavoriteError,
    MediaType,
)
from tests.shared.fixtures.factories import TestUserFactory


async def _echo(favorite):
    return favorite


class TestAddFavoriteCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.repo.add.side_effect = _echo
        self.command = AddFavoriteCommand(favorite_repository=self.repo)

    async def test_adds_new_favorite(self):
        self.repo.exists.return_value = False

        favorite = await self.command.execute(TestUserFactory.ALICE_ID, "857195", "video")

        assert favorite.user_id == TestUserFactory.ALICE_ID
        assert favorite.media_type is MediaType.VIDEO
        self.repo.add.assert_awaited_once()

    async def test_duplicate_is_rejected(self):
        self.repo.exists.return_value = True

        with pytest.raises(FavoriteAlreadyExistsError) as exc_info:
            await self.command.execute(TestUserFactory.ALICE_ID, "857195", "video")

        assert exc_info.value.message == "Already added to favorites"
        self.repo.add.assert_not_called()

    async def test_invalid_input_never_reaches_repository(self):
        with pytest.raises(InvalidFavoriteError):
            await self.command.execute(TestUserFactory.ALICE_ID, "", "video")

        self.repo.exists.assert_not_called()


class TestRemoveFavoriteCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.command = RemoveFavoriteCommand(favorite_repository=self.repo)

    async def test_removes(self):
        self.repo.remove.return_value = True

        await self.command.execute(TestUserFactory.ALICE_ID, "857195")

        self.repo.remove.assert_awaited_once_with(TestUserFactory.ALICE_ID, "857195")

    async def test_missing_favorite(self):
        self.repo.remove.return_value = False

        with pytest.raises(FavoriteNotFoundError):
            await self.command.execute(TestUserFactory.ALICE_ID, "857195")


class TestFavoriteQueries:
    async def test_list_is_scoped_to_user(self):
        repo = AsyncMock()
        repo.list_by_user.return_value = []

        await ListFavoritesQuery(favorite_repository=repo).execute(TestUserFactory.BOB_ID)

        repo.list_by_user.assert_awaited_once_with(TestUserFactory.BOB_ID)

    async def test_is_favorite(self):
        repo = AsyncMock()
        repo.exists.return_value = True

        assert await IsFavoriteQuery(favorite_repository=repo).execute(
            TestUserFactory.ALICE_ID,
            "857195",
        )

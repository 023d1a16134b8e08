"""Unit tests for comment commands and queries."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from omi.application.commands import (
    AddCommentCommand,
    DeleteCommentCommand,
    UpdateCommentCommand,
)
from omi.application.queries import ListCommentsQuery
from omi.domain.comments import CommentNotFoundError, InvalidCommentError
from omi.domain.shared import ResourceOwnershipError
from tests.shared.fixtures.factories import TestUserFactory


async def _echo(comment):
    return comment


class TestAddCommentCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.repo.add.side_effect = _echo
        self.command = AddCommentCommand(comment_repository=self.repo)

    async def test_adds_trimmed_comment(self, video_link):
        comment = await self.command.execute(
            TestUserFactory.ALICE_ID,
            video_link,
            "  nice shot  ",
        )

        assert comment.content == "nice shot"
        assert comment.user_id == TestUserFactory.ALICE_ID

    async def test_blank_content_rejected(self, video_link):
        with pytest.raises(InvalidCommentError):
            await self.command.execute(TestUserFactory.ALICE_ID, video_link, "   ")

        self.repo.add.assert_not_called()


class TestUpdateCommentCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.repo.update.side_effect = _echo
        self.command = UpdateCommentCommand(comment_repository=self.repo)

    async def test_owner_edits(self, alice_comment):
        self.repo.find_by_id.return_value = alice_comment

        updated = await self.command.execute(
            alice_comment.id,
            TestUserFactory.ALICE_ID,
            "edited",
        )

        assert updated.content == "edited"

    async def test_other_user_forbidden(self, alice_comment):
        self.repo.find_by_id.return_value = alice_comment

        with pytest.raises(ResourceOwnershipError) as exc_info:
            await self.command.execute(
                alice_comment.id,
                TestUserFactory.BOB_ID,
                "hijacked",
            )

        assert exc_info.value.message == "You can only update your own comments"
        assert alice_comment.content == "First!"
        self.repo.update.assert_not_called()

    async def test_missing_comment(self):
        self.repo.find_by_id.return_value = None

        with pytest.raises(CommentNotFoundError):
            await self.command.execute(uuid4(), TestUserFactory.ALICE_ID, "text")

    async def test_content_checked_before_lookup(self):
        with pytest.raises(InvalidCommentError):
            await self.command.execute(uuid4(), TestUserFactory.ALICE_ID, "")

        self.repo.find_by_id.assert_not_called()


class TestDeleteCommentCommand:
    def setup_method(self):
        self.repo = AsyncMock()
        self.command = DeleteCommentCommand(comment_repository=self.repo)

    async def test_owner_deletes(self, alice_comment):
        self.repo.find_by_id.return_value = alice_comment

        await self.command.execute(alice_comment.id, TestUserFactory.ALICE_ID)

        self.repo.delete.assert_awaited_once_with(alice_comment.id)

    async def test_other_user_forbidden(self, alice_comment):
        self.repo.find_by_id.return_value = alice_comment

        with pytest.raises(ResourceOwnershipError):
            await self.command.execute(alice_comment.id, TestUserFactory.BOB_ID)

        self.repo.delete.assert_not_called()


class TestListCommentsQuery:
    async def test_lists_by_normalized_link(self, alice_comment, video_link):
        repo = AsyncMock()
        repo.list_by_video.return_value = [alice_comment]

        comments = await ListCommentsQuery(comment_repository=repo).execute(
            f" {video_link} ",
        )

        assert comments == [alice_comment]
        repo.list_by_video.assert_awaited_once_with(video_link)

"""
Integration tests for favorite, rating and comment repositories.

Run against PostgreSQL so the ON CONFLICT upsert, unique constraints and
cascading deletes behave as in production.
"""

import pytest
from sqlalchemy import delete, func, select

from omi.domain.comments import Comment
from omi.domain.favorites import Favorite, FavoriteAlreadyExistsError, MediaType
from omi.infrastructure.persistence.sqlalchemy.models import RatingModel
from omi.infrastructure.persistence.sqlalchemy.repositories import (
    CommentRepositorySQLAlchemy,
    FavoriteRepositorySQLAlchemy,
    RatingRepositorySQLAlchemy,
)
from omi_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from tests.shared.fixtures.factories import TestUserFactory

pytestmark = pytest.mark.integration

VIDEO_LINK = "https://www.pexels.com/video/857195/"


class TestFavoriteRepositoryPostgres:
    async def test_add_and_list(self, db_session):
        repo = FavoriteRepositorySQLAlchemy(db_session)

        await repo.add(Favorite(TestUserFactory.ALICE_ID, "1", "photo"))
        await repo.add(Favorite(TestUserFactory.ALICE_ID, "2", "video"))
        await repo.add(Favorite(TestUserFactory.BOB_ID, "3", "video"))

        favorites = await repo.list_by_user(TestUserFactory.ALICE_ID)

        assert {f.pexels_id for f in favorites} == {"1", "2"}
        assert {f.media_type for f in favorites} == {MediaType.PHOTO, MediaType.VIDEO}

    async def test_unique_constraint_maps_to_domain_error(self, db_session):
        repo = FavoriteRepositorySQLAlchemy(db_session)
        await repo.add(Favorite(TestUserFactory.ALICE_ID, "1", "video"))

        with pytest.raises(FavoriteAlreadyExistsError):
            await repo.add(Favorite(TestUserFactory.ALICE_ID, "1", "video"))

    async def test_remove_reports_whether_row_existed(self, db_session):
        repo = FavoriteRepositorySQLAlchemy(db_session)
        await repo.add(Favorite(TestUserFactory.ALICE_ID, "1", "video"))

        assert await repo.remove(TestUserFactory.BOB_ID, "1") is False
        assert await repo.remove(TestUserFactory.ALICE_ID, "1") is True
        assert await repo.exists(TestUserFactory.ALICE_ID, "1") is False


class TestRatingRepositoryPostgres:
    async def test_upsert_keeps_single_row(self, db_session):
        repo = RatingRepositorySQLAlchemy(db_session)

        first = await repo.upsert(TestUserFactory.ALICE_ID, VIDEO_LINK, 2)
        second = await repo.upsert(TestUserFactory.ALICE_ID, VIDEO_LINK, 5)

        count = await db_session.scalar(
            select(func.count()).select_from(RatingModel),
        )
        assert count == 1
        assert second.id == first.id
        assert second.score == 5
        assert second.author is not None
        assert second.author.first_name == "Alice"

    async def test_scores_for_video(self, db_session):
        repo = RatingRepositorySQLAlchemy(db_session)
        await repo.upsert(TestUserFactory.ALICE_ID, VIDEO_LINK, 4)
        await repo.upsert(TestUserFactory.BOB_ID, VIDEO_LINK, 2)
        await repo.upsert(TestUserFactory.BOB_ID, "https://other", 1)

        scores = await repo.list_scores_for_video(VIDEO_LINK)

        assert sorted(scores) == [2, 4]


class TestCommentRepositoryPostgres:
    async def test_add_returns_comment_with_author(self, db_session):
        repo = CommentRepositorySQLAlchemy(db_session)

        saved = await repo.add(
            Comment(TestUserFactory.BOB_ID, VIDEO_LINK, "Lovely light"),
        )

        assert saved.author is not None
        assert saved.author.email == TestUserFactory.BOB_EMAIL

    async def test_update_persists_content(self, db_session):
        repo = CommentRepositorySQLAlchemy(db_session)
        comment = await repo.add(Comment(TestUserFactory.ALICE_ID, VIDEO_LINK, "v1"))

        comment.edit("v2")
        await repo.update(comment)

        reloaded = await repo.find_by_id(comment.id)
        assert reloaded is not None
        assert reloaded.content == "v2"


class TestCascadeOnUserDelete:
    async def test_resources_removed_with_owner(self, db_session):
        favorites = FavoriteRepositorySQLAlchemy(db_session)
        ratings = RatingRepositorySQLAlchemy(db_session)
        comments = CommentRepositorySQLAlchemy(db_session)

        await favorites.add(Favorite(TestUserFactory.ALICE_ID, "1", "video"))
        await ratings.upsert(TestUserFactory.ALICE_ID, VIDEO_LINK, 3)
        await comments.add(Comment(TestUserFactory.ALICE_ID, VIDEO_LINK, "hi"))
        await ratings.upsert(TestUserFactory.BOB_ID, VIDEO_LINK, 5)
        await db_session.commit()

        await db_session.execute(
            delete(UserModel).where(UserModel.id == TestUserFactory.ALICE_ID),
        )
        await db_session.commit()

        assert await favorites.list_by_user(TestUserFactory.ALICE_ID) == []
        assert await comments.list_by_video(VIDEO_LINK) == []
        assert await ratings.list_scores_for_video(VIDEO_LINK) == [5]

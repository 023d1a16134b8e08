"""Tests for the Favorite, Rating and Comment entities."""

from uuid import uuid4

import pytest

from omi.domain.comments import MAX_CONTENT_LENGTH, Comment, InvalidCommentError
from omi.domain.favorites import Favorite, InvalidFavoriteError, MediaType
from omi.domain.ratings import InvalidScoreError, Rating, validate_score
from omi.domain.shared.exceptions import ValidationError

VIDEO = "https://www.pexels.com/video/1/"


class TestFavorite:
    def test_parses_media_type(self):
        favorite = Favorite(user_id=uuid4(), pexels_id=" 123 ", media_type="photo")

        assert favorite.pexels_id == "123"
        assert favorite.media_type is MediaType.PHOTO

    def test_requires_pexels_id(self):
        with pytest.raises(InvalidFavoriteError):
            Favorite(user_id=uuid4(), pexels_id="  ", media_type="video")

    def test_rejects_unknown_media_type(self):
        with pytest.raises(InvalidFavoriteError):
            Favorite(user_id=uuid4(), pexels_id="1", media_type="gif")


class TestRating:
    @pytest.mark.parametrize("score", [1, 3, 5])
    def test_valid_scores(self, score):
        assert Rating(user_id=uuid4(), video_link=VIDEO, score=score).score == score

    @pytest.mark.parametrize("score", [0, 6, -1, 2.5, "4", True, None])
    def test_invalid_scores(self, score):
        with pytest.raises(InvalidScoreError):
            validate_score(score)

    def test_requires_video_link(self):
        with pytest.raises(ValidationError):
            Rating(user_id=uuid4(), video_link="  ", score=3)

    def test_updated_at_defaults_to_created_at(self):
        rating = Rating(user_id=uuid4(), video_link=VIDEO, score=3)

        assert rating.updated_at == rating.created_at


class TestComment:
    def test_content_is_trimmed(self):
        comment = Comment(user_id=uuid4(), video_link=VIDEO, content="  hi  ")

        assert comment.content == "hi"

    @pytest.mark.parametrize("content", ["", "   ", None])
    def test_empty_content_rejected(self, content):
        with pytest.raises(InvalidCommentError):
            Comment(user_id=uuid4(), video_link=VIDEO, content=content)

    def test_length_limit_applies_after_trimming(self):
        padded = "  " + "x" * MAX_CONTENT_LENGTH + "  "

        assert len(Comment(user_id=uuid4(), video_link=VIDEO, content=padded).content) == (
            MAX_CONTENT_LENGTH
        )

        with pytest.raises(InvalidCommentError):
            Comment(
                user_id=uuid4(),
                video_link=VIDEO,
                content="x" * (MAX_CONTENT_LENGTH + 1),
            )

    def test_edit_refreshes_updated_at(self):
        comment = Comment(user_id=uuid4(), video_link=VIDEO, content="before")
        created = comment.created_at

        comment.edit(" after ")

        assert comment.content == "after"
        assert comment.created_at == created
        assert comment.updated_at >= created

    def test_entities_compare_by_id(self):
        comment = Comment(user_id=uuid4(), video_link=VIDEO, content="a")
        same = Comment(
            id=comment.id,
            user_id=comment.user_id,
            video_link=VIDEO,
            content="b",
        )

        assert comment == same
        assert hash(comment) == hash(same)

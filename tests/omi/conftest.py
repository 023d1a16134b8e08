"""
Pytest configuration for omi resource tests.

Fixtures for favorites, ratings and comments owned by Alice or Bob.
"""

import pytest

from omi.domain.comments import Comment
from omi.domain.ratings import Rating
from omi.domain.shared.resource_author import ResourceAuthor
from tests.shared.fixtures.factories import TestUserFactory

VIDEO_LINK = "https://www.pexels.com/video/857195/"


@pytest.fixture
def video_link() -> str:
    return VIDEO_LINK


@pytest.fixture
def alice_comment() -> Comment:
    return Comment(
        user_id=TestUserFactory.ALICE_ID,
        video_link=VIDEO_LINK,
        content="First!",
        author=ResourceAuthor("Alice", "Archer", TestUserFactory.ALICE_EMAIL),
    )


@pytest.fixture
def alice_rating() -> Rating:
    return Rating(user_id=TestUserFactory.ALICE_ID, video_link=VIDEO_LINK, score=4)

"""
E2E tests for the account lifecycle of a viewer.

1. Register and read the profile
2. Favorite, rate and comment on a video
3. Forget the password and reset it
4. Delete the account and everything it owns
"""

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures.api import register_payload
from tests.shared.fixtures.factories import DEFAULT_PASSWORD


@pytest.mark.e2e
class TestAccountLifecycleJourney:
    """Full journey from registration to account deletion."""

    def test_viewer_full_journey(  # noqa: PLR0915
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        video_link: str,
    ):
        # Register
        registered = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json=register_payload(),
        )
        assert registered.status_code == 201
        headers = {"Authorization": f"Bearer {registered.json()['token']}"}

        profile = test_client.get(f"{api_v1_prefix}/auth/profile", headers=headers)
        assert profile.json()["id"] == registered.json()["user"]["id"]

        # Bob rates the same video so stats outlive Alice's account
        bob = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json=register_payload("bob@example.com", firstName="Bob"),
        )
        bob_headers = {"Authorization": f"Bearer {bob.json()['token']}"}
        test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=bob_headers,
            json={"videoLink": video_link, "score": 1},
        )

        # Interact with a video
        assert test_client.post(
            f"{api_v1_prefix}/favorites",
            headers=headers,
            json={"pexelsId": "857195", "mediaType": "video"},
        ).status_code == 201
        assert test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=headers,
            json={"videoLink": video_link, "score": 5},
        ).status_code == 200
        assert test_client.post(
            f"{api_v1_prefix}/comments",
            headers=headers,
            json={"videoLink": video_link, "content": "Beautiful"},
        ).status_code == 201

        stats = test_client.get(
            f"{api_v1_prefix}/ratings/stats",
            params={"videoLink": video_link},
        ).json()
        assert stats["totalRatings"] == 2
        assert stats["averageRating"] == 3

        # Forgot and reset password
        forgot = test_client.post(
            f"{api_v1_prefix}/auth/forgot-password",
            json={"email": "alice@example.com"},
        )
        reset = test_client.post(
            f"{api_v1_prefix}/auth/reset-password",
            json={"token": forgot.json()["token"], "newPassword": "Changed123!"},
        )
        assert reset.status_code == 200

        old_login = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "alice@example.com", "password": DEFAULT_PASSWORD},
        )
        assert old_login.status_code == 401

        # Delete the account
        deleted = test_client.request(
            "DELETE",
            f"{api_v1_prefix}/auth/account",
            headers=headers,
            json={"password": "Changed123!"},
        )
        assert deleted.status_code == 200

        # Owned resources are gone, other users' data stays
        stats = test_client.get(
            f"{api_v1_prefix}/ratings/stats",
            params={"videoLink": video_link},
        ).json()
        assert stats["totalRatings"] == 1
        assert stats["averageRating"] == 1

        comments = test_client.get(
            f"{api_v1_prefix}/comments/video",
            params={"videoLink": video_link},
        ).json()
        assert comments == []

        # The old token no longer resolves to a user
        stale = test_client.get(f"{api_v1_prefix}/favorites", headers=headers)
        assert stale.status_code == 401

        # The email can be registered again
        again = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json=register_payload(),
        )
        assert again.status_code == 201

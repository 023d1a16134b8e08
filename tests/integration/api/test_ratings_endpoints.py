"""Integration tests for ratings endpoints."""

import pytest
from fastapi.testclient import TestClient


class TestRateVideo:
    """Tests for POST /api/v1/ratings."""

    def test_rating_again_replaces_score(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_v1_prefix: str,
        video_link: str,
    ):
        first = test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=auth_headers,
            json={"videoLink": video_link, "score": 2},
        )
        second = test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=auth_headers,
            json={"videoLink": video_link, "score": 5},
        )

        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["score"] == 5
        assert second.json()["user"]["firstName"] == "Alice"

        stats = test_client.get(
            f"{api_v1_prefix}/ratings/stats",
            params={"videoLink": video_link},
        ).json()
        assert stats["totalRatings"] == 1

    @pytest.mark.parametrize("score", [0, 6])
    def test_score_out_of_range(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_v1_prefix: str,
        video_link: str,
        score: int,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=auth_headers,
            json={"videoLink": video_link, "score": score},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_SCORE"

    def test_requires_authentication(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        video_link: str,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/ratings",
            json={"videoLink": video_link, "score": 3},
        )

        assert response.status_code == 401


class TestRatingStats:
    """Tests for GET /api/v1/ratings/stats."""

    def test_unrated_video(
        self,
        test_client: TestClient,
        api_v1_prefix: str,
        video_link: str,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/ratings/stats",
            params={"videoLink": video_link},
        )

        assert response.status_code == 200
        assert response.json() == {
            "averageRating": 0,
            "totalRatings": 0,
            "distribution": {"1": 0, "2": 0, "3": 0, "4": 0, "5": 0},
        }

    def test_stats_are_public(
        self,
        test_client: TestClient,
        auth_headers: dict,
        other_auth_headers: dict,
        api_v1_prefix: str,
        video_link: str,
    ):
        for headers, score in ((auth_headers, 5), (other_auth_headers, 2)):
            test_client.post(
                f"{api_v1_prefix}/ratings",
                headers=headers,
                json={"videoLink": video_link, "score": score},
            )

        response = test_client.get(
            f"{api_v1_prefix}/ratings/stats",
            params={"videoLink": video_link},
        )

        data = response.json()
        assert data["averageRating"] == 3.5
        assert data["totalRatings"] == 2
        assert data["distribution"]["5"] == 1
        assert data["distribution"]["2"] == 1


class TestUserRating:
    """Tests for GET /api/v1/ratings/user."""

    def test_not_rated_returns_null(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_v1_prefix: str,
        video_link: str,
    ):
        response = test_client.get(
            f"{api_v1_prefix}/ratings/user",
            headers=auth_headers,
            params={"videoLink": video_link},
        )

        assert response.status_code == 200
        assert response.json() is None

    def test_returns_own_rating(
        self,
        test_client: TestClient,
        auth_headers: dict,
        api_v1_prefix: str,
        video_link: str,
    ):
        test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=auth_headers,
            json={"videoLink": video_link, "score": 4},
        )

        response = test_client.get(
            f"{api_v1_prefix}/ratings/user",
            headers=auth_headers,
            params={"videoLink": video_link},
        )

        assert response.json()["score"] == 4


class TestDeleteRating:
    """Tests for DELETE /api/v1/ratings/{rating_id}."""

    def test_only_owner_can_delete(
        self,
        test_client: TestClient,
        auth_headers: dict,
        other_auth_headers: dict,
        api_v1_prefix: str,
        video_link: str,
    ):
        rating_id = test_client.post(
            f"{api_v1_prefix}/ratings",
            headers=auth_headers,
            json={"videoLink": video_link, "score": 4},
        ).json()["id"]

        forbidden = test_client.delete(
            f"{api_v1_prefix}/ratings/{rating_id}",
            headers=other_auth_headers,
        )
        assert forbidden.status_code == 403
        assert forbidden.json()["detail"] == "You can only delete your own ratings"

        deleted = test_client.delete(
            f"{api_v1_prefix}/ratings/{rating_id}",
            headers=auth_headers,
        )
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Rating deleted successfully"

        missing = test_client.delete(
            f"{api_v1_prefix}/ratings/{rating_id}",
            headers=auth_headers,
        )
        assert missing.status_code == 404

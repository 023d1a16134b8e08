"""Pytest fixtures for API integration tests."""

# Re-export shared API fixtures
from tests.shared.fixtures.api import (
    api_settings,
    api_v1_prefix,
    auth_headers,
    other_auth_headers,
    registered_user,
    test_client,
    test_db_engine,
    video_link,
)

__all__ = [
    "api_settings",
    "api_v1_prefix",
    "auth_headers",
    "other_auth_headers",
    "registered_user",
    "test_client",
    "test_db_engine",
    "video_link",
]

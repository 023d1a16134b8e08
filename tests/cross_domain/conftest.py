"""
Pytest configuration for cross-domain tests.

These tests span both bounded contexts (omi + omi_identity) and test
their interactions.
"""

# Re-export shared fixtures
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
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    session_maker,
)

__all__ = [
    "api_settings",
    "api_v1_prefix",
    "async_engine",
    "auth_headers",
    "db_session",
    "other_auth_headers",
    "postgres_container",
    "registered_user",
    "session_maker",
    "test_client",
    "test_db_engine",
    "video_link",
]

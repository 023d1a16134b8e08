"""
Pytest configuration for omi_identity tests.

This conftest provides fixtures specific to the identity domain
(users, authentication, password reset).
"""

import pytest

from omi_identity import JWTService, PasswordHashingService, User
from tests.shared.fixtures.factories import TestUserFactory, fast_password_service

TEST_JWT_SECRET = "unit-test-secret"


@pytest.fixture
def password_service() -> PasswordHashingService:
    return fast_password_service()


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_JWT_SECRET)


@pytest.fixture
def alice(password_service) -> User:
    return TestUserFactory.alice(password_service)

"""Tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from omi_identity import InvalidTokenError, JWTService


class TestJWTService:
    def setup_method(self):
        self.service = JWTService(secret_key="unit-test-secret")
        self.user_id = uuid4()

    def test_round_trip_claims(self):
        token = self.service.create_access_token(self.user_id, "a@example.com")

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == "a@example.com"

    def test_default_lifetime_is_24_hours(self):
        token = self.service.create_access_token(self.user_id, "a@example.com")
        claims = jwt.decode(token, "unit-test-secret", algorithms=["HS256"])

        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_expired_token_rejected(self):
        token = self.service.create_access_token(
            self.user_id,
            "a@example.com",
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_wrong_secret_rejected(self):
        other = JWTService(secret_key="another-secret")
        token = other.create_access_token(self.user_id, "a@example.com")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("not.a.jwt")

    def test_missing_claims_rejected(self):
        token = jwt.encode({"foo": "bar"}, "unit-test-secret", algorithm="HS256")

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_empty_secret_not_allowed(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="")

    def test_foreign_issuer_rejected(self):
        token = jwt.encode(
            {
                "sub": str(self.user_id),
                "email": "a@example.com",
                "iss": "someone-else",
                "exp": 4102444800,
            },
            "unit-test-secret",
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

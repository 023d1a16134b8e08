"""Tests for ResetTokenService."""

import hashlib

from omi_identity import ResetTokenService


class TestResetTokenService:
    def test_generate_returns_raw_and_digest(self):
        token = ResetTokenService().generate()

        assert len(token.raw) == 64
        assert token.hashed == hashlib.sha256(token.raw.encode()).hexdigest()
        assert token.hashed != token.raw

    def test_tokens_are_unique(self):
        service = ResetTokenService()

        assert len({service.generate().raw for _ in range(50)}) == 50

    def test_hash_is_deterministic(self):
        assert ResetTokenService.hash("abc") == ResetTokenService.hash("abc")

"""Password reset secrets.

Reset secrets are high-entropy and single use, so a fast SHA-256 digest is
enough to store them; the slow password hasher is not involved.
"""

import hashlib
import secrets
from dataclasses import dataclass


@dataclass(frozen=True)
class ResetToken:
    """A freshly generated reset secret and the digest that gets persisted."""

    raw: str
    hashed: str


class ResetTokenService:
    """Generate and hash password reset secrets."""

    TOKEN_BYTES = 32  # 256 bits

    def generate(self) -> ResetToken:
        raw = secrets.token_hex(self.TOKEN_BYTES)
        return ResetToken(raw=raw, hashed=self.hash(raw))

    @staticmethod
    def hash(raw_token: str) -> str:
        return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()

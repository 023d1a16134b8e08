"""Identity services - JWT, password hashing and reset secrets."""

from omi_identity.services.jwt_service import JWTService
from omi_identity.services.password_service import PasswordHashingService
from omi_identity.services.reset_token_service import ResetToken, ResetTokenService

__all__ = [
    "JWTService",
    "PasswordHashingService",
    "ResetToken",
    "ResetTokenService",
]

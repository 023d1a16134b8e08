"""Application services for identity management."""

from omi_identity.application.services.authentication_service import (
    AuthenticationService,
)
from omi_identity.application.services.password_reset_service import (
    PasswordResetService,
)

__all__ = ["AuthenticationService", "PasswordResetService"]

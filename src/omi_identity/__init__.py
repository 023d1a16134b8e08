"""OMI Identity - user accounts and authentication.

This package handles all identity-related concerns:
- User management (registration, profile, deletion)
- Authentication (login, bearer tokens)
- Password management (hashing, forgot/reset flow)
- Email notifications (password reset)

The omi engagement domain (favorites, ratings, comments) only references
user_id, keeping identity concerns separated.
"""

from omi_identity.application.context import UserContext
from omi_identity.application.ports import PasswordResetEmailSender
from omi_identity.application.services import (
    AuthenticationService,
    PasswordResetService,
)
from omi_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidAgeError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
    UserUpdate,
)
from omi_identity.exceptions import (
    AuthError,
    CurrentPasswordRequiredError,
    EmailDeliveryError,
    IncorrectPasswordError,
    InvalidCredentialsError,
    InvalidResetTokenError,
    InvalidTokenError,
    WeakPasswordError,
)
from omi_identity.schemas import (
    AuthResult,
    ForgotPasswordResult,
    PublicUser,
    TokenPayload,
)
from omi_identity.services import (
    JWTService,
    PasswordHashingService,
    ResetTokenService,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidAgeError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserUpdate",
    # Exceptions
    "AuthError",
    "CurrentPasswordRequiredError",
    "EmailDeliveryError",
    "IncorrectPasswordError",
    "InvalidCredentialsError",
    "InvalidResetTokenError",
    "InvalidTokenError",
    "WeakPasswordError",
    # Schemas
    "AuthResult",
    "ForgotPasswordResult",
    "PublicUser",
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    "ResetTokenService",
    # Application
    "AuthenticationService",
    "PasswordResetEmailSender",
    "PasswordResetService",
    "UserContext",
]

"""Identity and authentication exceptions.

These exceptions are raised by the omi_identity package. They extend the
shared domain hierarchy so the API layer maps them to HTTP responses
without per-router handling.
"""

from typing import Any

from omi.domain.shared.exceptions import (
    AuthenticationError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class AuthError(AuthenticationError):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, details)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The message is identical for an unknown email and a wrong password.
    ``reason`` tells the two apart for logging only.
    """

    def __init__(self, reason: str = "unknown"):
        self.reason = reason
        super().__init__(
            "Invalid email or password",
            ErrorCode.INVALID_CREDENTIALS,
            {"reason": reason},
        )


class IncorrectPasswordError(AuthError):
    """Raised when the current password supplied for a sensitive change is wrong."""

    def __init__(self, message: str = "Current password is incorrect"):
        super().__init__(message, ErrorCode.INCORRECT_PASSWORD)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class CurrentPasswordRequiredError(ValidationError):
    """Raised when a password change omits the current password."""

    def __init__(
        self,
        message: str = "Current password is required to set a new password",
    ):
        super().__init__(message, ErrorCode.CURRENT_PASSWORD_REQUIRED)


class InvalidResetTokenError(AuthError):
    """Raised when a password reset token is invalid or expired."""

    def __init__(self, message: str = "Invalid or expired password reset token"):
        super().__init__(message, ErrorCode.INVALID_RESET_TOKEN)


class EmailDeliveryError(ExternalServiceError):
    """Raised when an outgoing email could not be handed to the mail server."""

    def __init__(self, message: str = "Failed to send email", **details: Any):
        super().__init__(message, ErrorCode.EMAIL_DELIVERY_FAILED, details)

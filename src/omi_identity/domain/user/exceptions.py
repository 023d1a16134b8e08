"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from omi.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class InvalidAgeError(ValidationError):
    """Raised when an age falls outside the accepted range."""

    def __init__(self, age: int, min_age: int, max_age: int) -> None:
        self.age = age
        super().__init__(
            f"Age must be between {min_age} and {max_age}",
            ErrorCode.INVALID_AGE,
            {"age": age},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "User already exists with this email",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            {"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": user_id},
        )

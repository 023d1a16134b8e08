"""User domain manages user identity only.

This domain handles:
- User aggregate (identity, credentials, reset token state)
- Email normalization
- The repository contract the persistence layer fulfils

Favorites, ratings and comments live in the omi package and only
reference user_id.
"""

from omi_identity.domain.user.age_policy import MAX_AGE, MIN_AGE, validate_age
from omi_identity.domain.user.aggregates import DEFAULT_RESET_TOKEN_TTL, User
from omi_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidAgeError,
    InvalidEmailError,
    UserNotFoundError,
)
from omi_identity.domain.user.repositories import UserRepository
from omi_identity.domain.user.value_objects import (
    Email,
    UserUpdate,
)

__all__ = [
    "DEFAULT_RESET_TOKEN_TTL",
    "MAX_AGE",
    "MIN_AGE",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidAgeError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserUpdate",
    "validate_age",
]

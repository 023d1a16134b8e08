"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from omi_identity.domain.user import User


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address at issuance time
    exp
        Token expiration timestamp
    """

    user_id: UUID
    email: str
    exp: datetime


@dataclass(frozen=True)
class PublicUser:
    """User projection that is safe to return to clients.

    Never carries the password hash or the reset-token fields.
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    age: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> PublicUser:
        if user.id is None:
            msg = "Cannot project a user that has not been persisted"
            raise ValueError(msg)
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class AuthResult:
    """Result of a successful registration or login."""

    user: PublicUser
    token: str


@dataclass(frozen=True)
class ForgotPasswordResult:
    """Result of a forgot-password request.

    ``token`` is only populated outside production so the flow can be
    exercised without a mail server.
    """

    message: str
    token: str | None = None

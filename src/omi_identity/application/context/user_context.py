"""User context for request-scoped user identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from omi_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """Immutable context for the current authenticated user."""

    user_id: UUID
    email: str

    @classmethod
    def create(cls, user: User) -> UserContext:
        if user.id is None:
            msg = "Cannot build a context for an unsaved user"
            raise ValueError(msg)
        return cls(user_id=user.id, email=user.email)

    def __str__(self) -> str:
        return f"UserContext({self.email})"

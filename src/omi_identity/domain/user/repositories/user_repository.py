"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from omi_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations must enforce email uniqueness at the storage layer and
    raise ``EmailAlreadyExistsError`` when it is violated.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their (normalized) email address."""

    @abstractmethod
    async def find_by_reset_token_hash(self, token_hash: str) -> Optional[User]:
        """Find the user holding the given password reset token hash."""

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check if a user exists with the given email."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user and return it with its assigned ID."""

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist all fields of an existing user in a single write."""

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID."""

"""User aggregate for identity concerns only."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from omi.domain.shared.time import is_past, utc_now
from omi_identity.domain.user.value_objects.email import Email

if TYPE_CHECKING:
    from omi_identity.domain.user.value_objects.user_update import UserUpdate
    from omi_identity.services.password_service import PasswordHashingService

DEFAULT_RESET_TOKEN_TTL = timedelta(hours=1)


@dataclass(frozen=True)
class User:
    """
    User aggregate root.

    Immutable: every mutator returns a new ``User`` and leaves persistence
    to the caller. ``id`` stays ``None`` until the repository saves the
    user for the first time.
    """

    email: str
    password_hash: str
    first_name: str
    last_name: str
    age: int
    id: UUID | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    reset_password_token_hash: str | None = None
    reset_password_expires_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "email", Email(self.email).value)
        has_hash = self.reset_password_token_hash is not None
        has_expiry = self.reset_password_expires_at is not None
        if has_hash != has_expiry:
            msg = "Reset token hash and expiry must be set together"
            raise ValueError(msg)

    @classmethod
    def create(
        cls,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        age: int,
        password_service: PasswordHashingService,
    ) -> User:
        """Build a new, not yet persisted user with a hashed password."""
        now = utc_now()
        return cls(
            email=Email(email).value,
            password_hash=password_service.hash(password),
            first_name=first_name,
            last_name=last_name,
            age=age,
            created_at=now,
            updated_at=now,
        )

    def validate_password(
        self,
        candidate: str,
        password_service: PasswordHashingService,
    ) -> bool:
        return password_service.verify(candidate, self.password_hash)

    def update(
        self,
        changes: UserUpdate,
        password_service: PasswordHashingService,
    ) -> User:
        """Return a copy with ``changes`` applied.

        Absent fields keep their current value. A new password is hashed
        before it is stored. ``id`` and ``created_at`` are carried over.
        """
        values: dict[str, object] = {"updated_at": utc_now()}
        if changes.email is not None:
            values["email"] = Email(changes.email).value
        if changes.password is not None:
            values["password_hash"] = password_service.hash(changes.password)
        if changes.first_name is not None:
            values["first_name"] = changes.first_name
        if changes.last_name is not None:
            values["last_name"] = changes.last_name
        if changes.age is not None:
            values["age"] = changes.age
        return replace(self, **values)

    def set_reset_password_token(
        self,
        token_hash: str,
        ttl: timedelta = DEFAULT_RESET_TOKEN_TTL,
    ) -> User:
        now = utc_now()
        return replace(
            self,
            reset_password_token_hash=token_hash,
            reset_password_expires_at=now + ttl,
            updated_at=now,
        )

    def clear_reset_password_token(self) -> User:
        return replace(
            self,
            reset_password_token_hash=None,
            reset_password_expires_at=None,
            updated_at=utc_now(),
        )

    def has_active_reset_token(self, now: datetime | None = None) -> bool:
        if self.reset_password_expires_at is None:
            return False
        return not is_past(self.reset_password_expires_at, now)

    def with_id(self, user_id: UUID) -> User:
        return replace(self, id=user_id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"

"""Authentication service for the user credential lifecycle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from omi_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserUpdate,
    validate_age,
)
from omi_identity.exceptions import (
    CurrentPasswordRequiredError,
    IncorrectPasswordError,
    InvalidCredentialsError,
)
from omi_identity.schemas import AuthResult, PublicUser

if TYPE_CHECKING:
    from omi_identity.domain.user import UserRepository
    from omi_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)

ACCOUNT_DELETED_MESSAGE = "Account deleted successfully"


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the User aggregate, the user repository, the password
    hasher and the JWT service to provide:
    - Registration and login
    - Profile read and update
    - Account deletion
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    def _issue_token(self, user: User) -> str:
        if user.id is None:
            msg = "Cannot issue a token for a user that has not been persisted"
            raise ValueError(msg)
        return self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
        )

    async def _get_user(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def register(  # noqa: PLR0913
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        age: int,
    ) -> AuthResult:
        validate_age(age)
        normalized = Email(email).value

        if await self._user_repo.find_by_email(normalized) is not None:
            raise EmailAlreadyExistsError(normalized)

        user = User.create(
            email=normalized,
            password=password,
            first_name=first_name,
            last_name=last_name,
            age=age,
            password_service=self._password_service,
        )
        # The unique index settles concurrent registrations
        user = await self._user_repo.save(user)

        logger.info("User registered: %s", user.email)
        token = self._issue_token(user)
        return AuthResult(user=PublicUser.from_user(user), token=token)

    async def login(self, email: str, password: str) -> AuthResult:
        normalized = Email.normalize(email)

        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            logger.warning("Login failed for %s: unknown email", normalized)
            raise InvalidCredentialsError(reason="unknown_email")

        if not user.validate_password(password, self._password_service):
            logger.warning("Login failed for %s: wrong password", normalized)
            raise InvalidCredentialsError(reason="wrong_password")

        if self._password_service.needs_rehash(user.password_hash):
            user = await self._user_repo.update(
                user.update(UserUpdate(password=password), self._password_service),
            )
            logger.info("Password hash upgraded for user: %s", user.id)

        logger.info("User logged in: %s", user.email)
        token = self._issue_token(user)
        return AuthResult(user=PublicUser.from_user(user), token=token)

    async def get_profile(self, user_id: UUID) -> PublicUser:
        return PublicUser.from_user(await self._get_user(user_id))

    async def update_profile(
        self,
        user_id: UUID,
        changes: UserUpdate,
        current_password: str | None = None,
    ) -> PublicUser:
        """Apply a partial profile update.

        The existing bearer token is not re-issued; its email claim keeps the
        old address until the next login.

        Raises
        ------
        UserNotFoundError
            If the user no longer exists
        CurrentPasswordRequiredError
            If a new password is given without the current one
        IncorrectPasswordError
            If the current password does not match
        EmailAlreadyExistsError
            If the new email belongs to another account
        InvalidAgeError
            If the new age is out of range
        """
        user = await self._get_user(user_id)

        if changes.password is not None:
            if not current_password:
                raise CurrentPasswordRequiredError
            if not user.validate_password(current_password, self._password_service):
                raise IncorrectPasswordError

        if changes.email is not None:
            new_email = Email(changes.email).value
            if new_email != user.email and await self._user_repo.exists_by_email(
                new_email,
            ):
                raise EmailAlreadyExistsError(new_email)

        if changes.age is not None:
            validate_age(changes.age)

        updated = await self._user_repo.update(
            user.update(changes, self._password_service),
        )

        logger.info("Profile updated for user: %s", user_id)
        return PublicUser.from_user(updated)

    async def delete_account(self, user_id: UUID, password: str) -> str:
        """Hard-delete the account after re-checking the password.

        Already issued tokens stay cryptographically valid but stop resolving
        to a user.
        """
        user = await self._get_user(user_id)

        if not user.validate_password(password, self._password_service):
            raise IncorrectPasswordError("Invalid password")

        await self._user_repo.delete(user_id)

        logger.info("Account deleted: %s", user_id)
        return ACCOUNT_DELETED_MESSAGE

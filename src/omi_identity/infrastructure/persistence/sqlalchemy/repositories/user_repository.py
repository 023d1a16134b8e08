"""SQLAlchemy implementation of UserRepository."""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from omi.domain.shared.time import ensure_tz_aware
from omi_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from omi_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_email_conflict(error: IntegrityError) -> bool:
    message = str(error.orig).lower()
    return "email" in message and ("unique" in message or "duplicate" in message)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_reset_token_hash(self, token_hash: str) -> User | None:
        stmt = select(UserModel).where(
            UserModel.reset_password_token_hash == token_hash,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: str) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == email.strip().lower())
        result = await self._session.execute(stmt)
        return result.first() is not None

    async def save(self, user: User) -> User:
        if user.id is None:
            user = user.with_id(uuid4())

        self._session.add(self._map_to_model(user))
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.info("Created user: %s (email: %s)", user.id, user.email)
        return user

    async def update(self, user: User) -> User:
        if user.id is None:
            msg = "Cannot update a user that has not been saved"
            raise ValueError(msg)

        model = await self._find_model_by_id(user.id)
        if model is None:
            raise UserNotFoundError(str(user.id))

        self._update_model(model, user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_email_conflict(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(model)

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        expires_at = model.reset_password_expires_at
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            first_name=model.first_name,
            last_name=model.last_name,
            age=model.age,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            reset_password_token_hash=model.reset_password_token_hash,
            reset_password_expires_at=(
                ensure_tz_aware(expires_at) if expires_at is not None else None
            ),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
            created_at=user.created_at,
            updated_at=user.updated_at,
            reset_password_token_hash=user.reset_password_token_hash,
            reset_password_expires_at=user.reset_password_expires_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.password_hash = user.password_hash
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.age = user.age
        model.updated_at = user.updated_at
        model.reset_password_token_hash = user.reset_password_token_hash
        model.reset_password_expires_at = user.reset_password_expires_at

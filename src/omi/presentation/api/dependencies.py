"""FastAPI dependency injection for the OMI API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Identity services (auth, password reset)
- Repository factory for favorites, ratings and comments
"""

import logging
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from omi.infrastructure.persistence.sqlalchemy.engine import build_engine
from omi.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from omi.presentation.api.config import get_api_settings
from omi_config.settings import Settings
from omi_identity import (
    AuthenticationService,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    PasswordResetService,
    ResetTokenService,
    UserContext,
)
from omi_identity.infrastructure.email import EmailService
from omi_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache()
def get_database_url() -> str:
    """Get database URL from application settings."""
    url = get_api_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return build_engine(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Identity Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service with the deployment's work factor."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_reset_token_service() -> ResetTokenService:
    return ResetTokenService()


def get_email_service(
    settings: Settings = Depends(get_api_settings),
) -> EmailService:
    return EmailService(settings)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, login, profile and account
    deletion.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_password_reset_service(  # noqa: PLR0913
    session: DBSession,
    settings: Settings = Depends(get_api_settings),
    password_service: PasswordHashingService = Depends(get_password_service),
    reset_token_service: ResetTokenService = Depends(get_reset_token_service),
    email_service: EmailService = Depends(get_email_service),
) -> PasswordResetService:
    """Get the forgot/reset password service.

    The raw reset token is echoed back only outside production.
    """
    return PasswordResetService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        reset_token_service=reset_token_service,
        email_sender=email_service,
        token_ttl=timedelta(minutes=settings.reset_password_token_ttl_minutes),
        expose_reset_token=not settings.is_production,
    )


# Type alias for injected password reset service
ResetService = Annotated[PasswordResetService, Depends(get_password_reset_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Extracts and validates the JWT token from the Authorization header,
    then checks that the user still exists.

    Returns
    -------
    UserContext of the authenticated user

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or the user no longer exists
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)
    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise _unauthorized("User not found")

    return UserContext.create(user)


# Type alias for injected current user
CurrentUser = Annotated[UserContext, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Repository Factory
# -----------------------------------------------------------------------------


async def get_repository_factory(
    session: AsyncSession = Depends(get_db_session),
) -> SQLAlchemyRepositoryFactory:
    """
    Get repository factory bound to the request's session.

    Ownership is enforced by the commands, which receive the caller's
    user_id explicitly.
    """
    return SQLAlchemyRepositoryFactory(session=session)


# Type alias for injected repository factory
RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]

# -----------------------------------------------------------------------------
# Application Commands & Queries
# -----------------------------------------------------------------------------
# Application layer classes have from_factory() classmethods that encapsulate
# their dependency knowledge. Use them directly in routers:
#
#   command = AddFavoriteCommand.from_factory(factory)
#   favorite = await command.execute(user.user_id, pexels_id, media_type)

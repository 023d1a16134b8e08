"""Forgot-password and reset-password flow."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import TYPE_CHECKING

from omi.domain.shared.time import utc_now
from omi_identity.domain.user import DEFAULT_RESET_TOKEN_TTL, Email, UserUpdate
from omi_identity.exceptions import InvalidResetTokenError
from omi_identity.schemas import ForgotPasswordResult

if TYPE_CHECKING:
    from omi_identity.application.ports import PasswordResetEmailSender
    from omi_identity.domain.user import UserRepository
    from omi_identity.services import PasswordHashingService, ResetTokenService

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "If the email exists, a reset link has been sent"
RESET_COMPLETED_MESSAGE = "Password reset successfully"


class PasswordResetService:
    """Service for handling password reset requests and token redemption."""

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        reset_token_service: ResetTokenService,
        email_sender: PasswordResetEmailSender,
        token_ttl: timedelta = DEFAULT_RESET_TOKEN_TTL,
        expose_reset_token: bool = False,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._reset_tokens = reset_token_service
        self._email_sender = email_sender
        self._token_ttl = token_ttl
        self._expose_reset_token = expose_reset_token

    async def request_reset(self, email: str) -> ForgotPasswordResult:
        """Issue a reset secret for ``email`` if such an account exists.

        The response is identical whether or not the email is registered.
        A delivery failure raises EmailDeliveryError; the caller rolls back
        so the stored hash does not outlive the failed request.
        """
        normalized = Email.normalize(email)
        user = await self._user_repo.find_by_email(normalized)
        if user is None:
            logger.info("Password reset requested for unknown email")
            return ForgotPasswordResult(message=RESET_REQUESTED_MESSAGE)

        token = self._reset_tokens.generate()
        await self._user_repo.update(
            user.set_reset_password_token(token.hashed, self._token_ttl),
        )

        self._email_sender.send_password_reset_email(
            to_email=user.email,
            reset_token=token.raw,
            first_name=user.first_name,
        )
        logger.info("Password reset email sent for user: %s", user.id)

        return ForgotPasswordResult(
            message=RESET_REQUESTED_MESSAGE,
            token=token.raw if self._expose_reset_token else None,
        )

    async def reset_password(self, token: str, new_password: str) -> str:
        token_hash = self._reset_tokens.hash(token)
        user = await self._user_repo.find_by_reset_token_hash(token_hash)

        if user is None:
            raise InvalidResetTokenError

        if not user.has_active_reset_token(utc_now()):
            logger.info("Expired password reset token used for user: %s", user.id)
            raise InvalidResetTokenError

        # Password replace and token clear go out as one row update
        updated = user.update(
            UserUpdate(password=new_password),
            self._password_service,
        ).clear_reset_password_token()
        await self._user_repo.update(updated)

        logger.info("Password reset completed for user: %s", user.id)
        return RESET_COMPLETED_MESSAGE

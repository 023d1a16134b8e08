"""Outbound email capability consumed by the password reset flow."""

from typing import Protocol


class PasswordResetEmailSender(Protocol):
    def send_password_reset_email(
        self,
        to_email: str,
        reset_token: str,
        first_name: str,
    ) -> None:
        """Deliver the raw reset token to ``to_email``.

        Raises EmailDeliveryError when the message cannot be handed off.
        """
        ...

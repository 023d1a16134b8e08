import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from omi_config.settings import Settings
from omi_identity.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Password Reset - OMI"

PASSWORD_RESET_TEXT = """Hi {first_name},

We received a request to reset the password of your OMI account.

Open the link below to choose a new password (valid for 1 hour):
{reset_link}

If you didn't ask for this, you can ignore this email. Your password
will not change.

-- OMI
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f4f4f4; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 12px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Hi {first_name},</h2>
        <p style="color: #374151; line-height: 1.6;">We received a request to reset the password of your OMI account.</p>
        <p style="color: #374151; line-height: 1.6;">This link is valid for 1 hour.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{reset_link}" style="display: inline-block; padding: 14px 28px; background-color: #667eea; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Reset password</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Or paste this link into your browser:</p>
        <p style="word-break: break-all; color: #667eea; font-size: 14px;">{reset_link}</p>
        <p style="color: #9ca3af; font-size: 13px; margin-top: 40px;">If you didn't ask for this, you can ignore this email.</p>
    </div>
</body>
</html>
"""


class EmailService:
    """SMTP implementation of PasswordResetEmailSender."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def _reset_link(self, reset_token: str) -> str:
        return f"{self._settings.reset_password_url}?token={reset_token}"

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            msg = "SMTP host not configured"
            raise EmailDeliveryError(msg)

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )
        timeout = self._settings.smtp_timeout_seconds

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                    timeout=timeout,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    timeout=timeout,
                ) as server:
                    if self._settings.smtp_starttls:
                        server.starttls(context=ssl.create_default_context())
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise EmailDeliveryError(to_email=to_email) from e

        logger.info("Email sent to %s", to_email)

    def send_password_reset_email(
        self,
        to_email: str,
        reset_token: str,
        first_name: str,
    ) -> None:
        if not self._settings.smtp_enabled:
            logger.warning(
                "SMTP disabled, skipping password reset email to %s",
                to_email,
            )
            return

        reset_link = self._reset_link(reset_token)
        message = self._create_message(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(
                first_name=first_name,
                reset_link=reset_link,
            ),
            html_body=PASSWORD_RESET_HTML.format(
                first_name=first_name,
                reset_link=reset_link,
            ),
        )

        self._send_email(to_email, message)

from omi_identity.application.ports.email_sender import PasswordResetEmailSender

__all__ = ["PasswordResetEmailSender"]

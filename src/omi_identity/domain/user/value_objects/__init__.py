"""Value objects for the user domain having identity concerns only."""

from omi_identity.domain.user.value_objects.email import Email
from omi_identity.domain.user.value_objects.user_update import UserUpdate

__all__ = [
    "Email",
    "UserUpdate",
]

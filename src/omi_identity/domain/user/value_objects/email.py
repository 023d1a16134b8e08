"""Email value object."""

import re
from dataclasses import dataclass

from omi_identity.domain.user.exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True)
class Email:
    """Validated, normalized email address.

    The stored value is always trimmed and lowercased so lookups and the
    unique index compare like with like.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            msg = "Email must be a string"
            raise InvalidEmailError(msg)
        normalized = self.value.strip().lower()
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if not EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {normalized}"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", normalized)

    @staticmethod
    def normalize(raw: str) -> str:
        """Normalize a raw address without validating it (used for lookups)."""
        return raw.strip().lower()

    def __str__(self) -> str:
        return self.value

from omi_identity.domain.user.aggregates.user import DEFAULT_RESET_TOKEN_TTL, User

__all__ = ["DEFAULT_RESET_TOKEN_TTL", "User"]

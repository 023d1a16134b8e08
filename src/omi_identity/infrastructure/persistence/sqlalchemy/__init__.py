"""SQLAlchemy implementation for omi_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from omi_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from omi_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from omi_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserModel",
    "UserRepositorySQLAlchemy",
]

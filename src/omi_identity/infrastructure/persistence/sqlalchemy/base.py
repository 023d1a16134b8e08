"""SQLAlchemy declarative base for omi_identity models.

Shares omi's metadata so owned resources can reference users.id.
"""

from omi.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin

IdentityBase = Base

__all__ = ["IdentityBase", "TimestampMixin"]

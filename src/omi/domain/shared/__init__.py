"""Shared domain building blocks used by every bounded context."""

from omi.domain.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    PermissionDeniedError,
    ResourceOwnershipError,
    ValidationError,
)
from omi.domain.shared.ownership import ensure_owner
from omi.domain.shared.resource_author import ResourceAuthor
from omi.domain.shared.time import ensure_tz_aware, is_past, utc_now
from omi.domain.shared.video_link import normalize_video_link

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ExternalServiceError",
    "PermissionDeniedError",
    "ResourceAuthor",
    "ResourceOwnershipError",
    "ValidationError",
    "ensure_owner",
    "ensure_tz_aware",
    "is_past",
    "normalize_video_link",
    "utc_now",
]

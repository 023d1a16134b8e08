"""Shared utilities for SQLAlchemy repositories."""

from datetime import datetime

from omi.domain.shared.resource_author import ResourceAuthor
from omi.domain.shared.time import ensure_tz_aware


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC."""
    return ensure_tz_aware(value)


def author_from_row(first_name: str, last_name: str, email: str) -> ResourceAuthor:
    return ResourceAuthor(first_name=first_name, last_name=last_name, email=email)

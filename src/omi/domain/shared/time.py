"""UTC clock helpers shared by entities and repositories."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def ensure_tz_aware(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values pass through unchanged."""
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def is_past(deadline: datetime, now: datetime | None = None) -> bool:
    """True once ``now`` (default: the current UTC time) has reached ``deadline``.

    Naive deadlines, as SQLite returns them, are read as UTC.
    """
    return ensure_tz_aware(deadline) <= (now or utc_now())

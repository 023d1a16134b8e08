from dataclasses import dataclass, fields


@dataclass(frozen=True)
class UserUpdate:
    """Partial set of profile changes. ``None`` means "keep the current value"."""

    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    age: int | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

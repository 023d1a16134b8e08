from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceAuthor:
    """Public identity of the user who wrote a rating or comment.

    Read-only: filled from the users table when the resource is loaded.
    """

    first_name: str
    last_name: str
    email: str

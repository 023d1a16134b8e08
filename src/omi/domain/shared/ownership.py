"""Ownership rule shared by all user-owned resources."""

from uuid import UUID

from omi.domain.shared.exceptions import ResourceOwnershipError


def ensure_owner(
    resource_user_id: UUID,
    requesting_user_id: UUID,
    action: str,
    resource_name: str,
) -> None:
    """Raise ResourceOwnershipError unless the requester owns the resource.

    Parameters
    ----------
    resource_user_id
        The ``user_id`` stored on the resource
    requesting_user_id
        The authenticated user attempting the mutation
    action
        Verb used in the error message ("update", "delete")
    resource_name
        Plural resource name used in the error message ("comments")
    """
    if resource_user_id != requesting_user_id:
        raise ResourceOwnershipError(
            action=action,
            resource_name=resource_name,
            details={
                "owner_id": str(resource_user_id),
                "requesting_user_id": str(requesting_user_id),
            },
        )

from typing import Optional
from uuid import UUID

from src.app.errors import ConflictError
from src.app.services.unit_of_work import UnitOfWork


async def check_for_username_conflicts(
    uow: UnitOfWork,
    organization_id: UUID,
    username: str,
    exclude_user_id: Optional[UUID] = None,
) -> None:
    """
    Fail fast when a username is already used inside an organization.

    The store's unique (organization_id, username) index stays the source
    of truth for concurrent writers; this only gives an early, clear error.
    A user never conflicts with itself (exclude_user_id).
    """
    taken_by = await uow.organization_users.get_organization_user_by_username(
        organization_id, username
    )
    if taken_by is not None and taken_by.user.id != exclude_user_id:
        raise ConflictError("USERNAME_TAKEN", "Username is already taken")

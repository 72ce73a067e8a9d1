"""
Profile Attachment

Binds an existing user to an organization under a tenant-scoped username.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.errors import NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Profile
from src.domain.usernames import get_org_username_from_email

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Creates organization profiles for users that already have an account.

    Runs inside the caller's unit of work and never commits; the caller
    decides the transaction boundary.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create_profile_for_existing_user(
        self,
        user_id: UUID,
        email: str,
        current_username: Optional[str],
        organization_id: UUID,
    ) -> Profile:
        """
        Attach an existing user to an organization.

        Args:
            user_id: ID of the existing user
            email: User's email, source of the tenant-scoped username
            current_username: Username the user had before joining the organization
            organization_id: Target organization ID

        Returns:
            The created Profile

        Raises:
            NotFoundError: user does not exist
            ConflictError: derived username already taken in the organization
        """
        user = await self.uow.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("USER_NOT_FOUND", "User not found")

        settings = await self.uow.organizations.get_settings(organization_id)
        auto_accept_email = settings.org_auto_accept_email if settings else None
        username_in_org = get_org_username_from_email(email, auto_accept_email)

        profile = await self.uow.profiles.create(
            Profile(
                user_id=user.id,
                organization_id=organization_id,
                username=username_in_org,
                previous_username=current_username,
            )
        )

        user.moved_to_profile_id = profile.id
        await self.uow.users.update(user)

        logger.info(
            f"Attached user {user.id} to organization {organization_id} as {username_in_org!r}"
        )
        return profile

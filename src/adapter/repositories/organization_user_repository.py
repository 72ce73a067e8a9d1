from typing import List, Optional, Set
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_conflict
from src.app.errors import NotFoundError
from src.app.repositories.organization_user_repository import (
    IOrganizationUserRepository,
    OrganizationUser,
)
from src.domain.entities import Membership, Profile, User


class OrganizationUserRepository(IOrganizationUserRepository):
    """Organization-scoped user queries using SQLModel (membership via Profile)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _users_of(self, organization_id: UUID):
        return (
            select(User, Profile)
            .join(Profile, Profile.user_id == User.id)
            .where(Profile.organization_id == organization_id)
        )

    async def _one(self, stmt) -> Optional[OrganizationUser]:
        result = await self.session.exec(stmt)
        row = result.one_or_none()
        return OrganizationUser(*row) if row else None

    async def get_organization_users(
        self, organization_id: UUID, emails: Set[str]
    ) -> List[OrganizationUser]:
        stmt = self._users_of(organization_id)
        if emails:
            stmt = stmt.where(col(User.email).in_(emails))
        stmt = stmt.order_by(col(User.created_at), col(User.email))
        result = await self.session.exec(stmt)
        return [OrganizationUser(user, profile) for user, profile in result.all()]

    async def get_organization_user(
        self, organization_id: UUID, user_id: UUID
    ) -> Optional[OrganizationUser]:
        return await self._one(self._users_of(organization_id).where(User.id == user_id))

    async def get_organization_user_by_email(
        self, organization_id: UUID, email: str
    ) -> Optional[OrganizationUser]:
        return await self._one(self._users_of(organization_id).where(User.email == email))

    async def get_organization_user_by_username(
        self, organization_id: UUID, username: str
    ) -> Optional[OrganizationUser]:
        return await self._one(
            self._users_of(organization_id).where(Profile.username == username)
        )

    async def update_organization_user(
        self, organization_id: UUID, user_id: UUID, data: dict
    ) -> OrganizationUser:
        """
        Apply a field-level update to a user of an organization.

        The username lands on the org profile; the user record's own username
        is only rewritten for accounts scoped to this organization.
        """
        member = await self.get_organization_user(organization_id, user_id)
        if member is None:
            raise NotFoundError("USER_NOT_FOUND", "User not found in this organization")
        user, profile = member

        data = dict(data)
        username = data.pop("username", None)
        for key, value in data.items():
            setattr(user, key, value)

        if username:
            profile.username = username
            self.session.add(profile)
            if user.organization_id == organization_id:
                user.username = username

        self.session.add(user)
        await flush_or_conflict(
            self.session,
            "USER_CONFLICT",
            "Email or username is already in use",
        )
        await self.session.refresh(user)
        await self.session.refresh(profile)
        return OrganizationUser(user, profile)

    async def delete_organization_user(
        self, organization_id: UUID, user_id: UUID
    ) -> OrganizationUser:
        """
        Remove a user from an organization.

        Drops the membership and profile; the user record itself is deleted
        only when the account is scoped to this organization.
        """
        member = await self.get_organization_user(organization_id, user_id)
        if member is None:
            raise NotFoundError("USER_NOT_FOUND", "User not found in this organization")
        user, profile = member

        stmt = select(Membership).where(
            Membership.user_id == user_id, Membership.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        membership = result.one_or_none()
        if membership is not None:
            await self.session.delete(membership)

        await self.session.delete(profile)
        await self.session.flush()

        if user.organization_id == organization_id:
            await self.session.delete(user)
            await self.session.flush()
        return member

from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_conflict
from src.app.repositories.membership_repository import IMembershipRepository
from src.domain.entities import Membership


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        stmt = select(Membership).where(
            Membership.user_id == user_id,
            Membership.organization_id == organization_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await flush_or_conflict(
            self.session,
            "ALREADY_MEMBER",
            "User is already a member of this organization",
        )
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.integrity import flush_or_conflict
from src.app.repositories.organization_repository import IOrganizationRepository
from src.domain.entities import Organization, OrganizationSettings


class OrganizationRepository(IOrganizationRepository):
    """Organization repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self, organization: Organization, settings: OrganizationSettings
    ) -> Organization:
        """Create an organization together with its settings"""
        self.session.add(organization)
        await flush_or_conflict(
            self.session, "SLUG_TAKEN", "An organization with this slug already exists"
        )

        settings.organization_id = organization.id
        self.session.add(settings)
        await flush_or_conflict(
            self.session,
            "AUTO_ACCEPT_DOMAIN_TAKEN",
            "Another organization already auto-accepts this email domain",
        )

        await self.session.refresh(organization)
        return organization

    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID (only rows flagged is_organization)"""
        stmt = select(Organization).where(
            Organization.id == organization_id,
            Organization.is_organization == True,  # noqa: E712
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id_with_settings(
        self, organization_id: UUID
    ) -> Optional[Tuple[Organization, Optional[OrganizationSettings]]]:
        """Get organization by ID together with its settings"""
        stmt = (
            select(Organization, OrganizationSettings)
            .outerjoin(
                OrganizationSettings,
                OrganizationSettings.organization_id == Organization.id,
            )
            .where(
                Organization.id == organization_id,
                Organization.is_organization == True,  # noqa: E712
            )
        )
        result = await self.session.exec(stmt)
        row = result.first()
        if row is None:
            return None
        organization, settings = row
        return organization, settings

    async def get_settings(self, organization_id: UUID) -> Optional[OrganizationSettings]:
        """Get the settings row of an organization"""
        stmt = select(OrganizationSettings).where(
            OrganizationSettings.organization_id == organization_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Organization]:
        """Get organization by live slug"""
        stmt = select(Organization).where(Organization.slug == slug)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_by_auto_accept_email(self, domain: str) -> List[Organization]:
        """Get every organization whose settings auto-accept the given domain"""
        stmt = select(Organization).join(
            OrganizationSettings,
            OrganizationSettings.organization_id == Organization.id,
        ).where(OrganizationSettings.org_auto_accept_email == domain)
        result = await self.session.exec(stmt)
        return list(result.all())

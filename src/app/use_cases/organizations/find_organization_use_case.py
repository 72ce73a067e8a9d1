"""
Find Organization Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork

from .dtos import OrganizationView


class FindOrganizationUseCase:
    """Looks up an organization by ID; absence is not an error"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organization_id: UUID, include_settings: bool = False
    ) -> Optional[OrganizationView]:
        async with self.uow:
            if not include_settings:
                organization = await self.uow.organizations.get_by_id(organization_id)
                return OrganizationView.from_entity(organization) if organization else None

            row = await self.uow.organizations.get_by_id_with_settings(organization_id)
            if row is None:
                return None
            organization, settings = row
            return OrganizationView.from_entity(organization, settings)

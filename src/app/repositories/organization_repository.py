from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Organization, OrganizationSettings


class IOrganizationRepository(ABC):
    """Organization repository interface - application layer"""

    @abstractmethod
    async def create(
        self, organization: Organization, settings: OrganizationSettings
    ) -> Organization:
        """Create an organization together with its settings"""
        pass

    @abstractmethod
    async def get_by_id(self, organization_id: UUID) -> Optional[Organization]:
        """Get organization by ID (only rows flagged is_organization)"""
        pass

    @abstractmethod
    async def get_by_id_with_settings(
        self, organization_id: UUID
    ) -> Optional[Tuple[Organization, Optional[OrganizationSettings]]]:
        """Get organization by ID together with its settings"""
        pass

    @abstractmethod
    async def get_settings(self, organization_id: UUID) -> Optional[OrganizationSettings]:
        """Get the settings row of an organization"""
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Organization]:
        """Get organization by live slug"""
        pass

    @abstractmethod
    async def find_by_auto_accept_email(self, domain: str) -> List[Organization]:
        """Get every organization whose settings auto-accept the given domain"""
        pass

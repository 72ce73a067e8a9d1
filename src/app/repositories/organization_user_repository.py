from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Set
from uuid import UUID

from src.domain.entities import Profile, User


class OrganizationUser(NamedTuple):
    """A user seen through its profile in one organization"""

    user: User
    profile: Profile


class IOrganizationUserRepository(ABC):
    """
    Organization-scoped user queries - application layer

    A user belongs to an organization when it has a Profile in it; the
    profile username is the tenant-scoped username. User.username is only
    meaningful for accounts created inside the organization.
    """

    @abstractmethod
    async def get_organization_users(
        self, organization_id: UUID, emails: Set[str]
    ) -> List[OrganizationUser]:
        """Get users of an organization, optionally restricted to emails (empty = all)"""
        pass

    @abstractmethod
    async def get_organization_user(
        self, organization_id: UUID, user_id: UUID
    ) -> Optional[OrganizationUser]:
        """Get a user of an organization by ID"""
        pass

    @abstractmethod
    async def get_organization_user_by_email(
        self, organization_id: UUID, email: str
    ) -> Optional[OrganizationUser]:
        """Get a user of an organization by email"""
        pass

    @abstractmethod
    async def get_organization_user_by_username(
        self, organization_id: UUID, username: str
    ) -> Optional[OrganizationUser]:
        """Get a user of an organization by tenant-scoped username"""
        pass

    @abstractmethod
    async def update_organization_user(
        self, organization_id: UUID, user_id: UUID, data: dict
    ) -> OrganizationUser:
        """Apply a field-level update to a user of an organization"""
        pass

    @abstractmethod
    async def delete_organization_user(
        self, organization_id: UUID, user_id: UUID
    ) -> OrganizationUser:
        """Remove a user from an organization and return what was removed"""
        pass

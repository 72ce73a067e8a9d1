from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Membership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and organization"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """
        Create a new membership

        Raises:
            ConflictError: ALREADY_MEMBER
        """
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Persist a role or accepted change"""
        pass

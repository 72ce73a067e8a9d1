from abc import ABC, abstractmethod

from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.organization_user_repository import IOrganizationUserRepository
from src.app.repositories.profile_repository import IProfileRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    organizations: IOrganizationRepository
    users: IUserRepository
    memberships: IMembershipRepository
    profiles: IProfileRepository
    organization_users: IOrganizationUserRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

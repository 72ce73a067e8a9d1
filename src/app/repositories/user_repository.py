from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """
    Identity store - application layer

    Emails are unique across every user; usernames only within the
    user's organization_id.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Global lookup, regardless of organization"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a user (optionally scoped to an organization).

        Raises:
            ConflictError: USER_CONFLICT when email or scoped username is taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist changes to a user.

        Raises:
            ConflictError: USER_CONFLICT when email or scoped username is taken
        """
        pass

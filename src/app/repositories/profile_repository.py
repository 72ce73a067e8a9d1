from abc import ABC, abstractmethod

from src.domain.entities import Profile


class IProfileRepository(ABC):
    """Profile repository interface - application layer"""

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """
        Bind a user to an organization under profile.username

        Raises:
            ConflictError: USERNAME_TAKEN when the username is used in the organization
        """
        pass

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class IEmailService(ABC):
    """Outbound transactional email - application layer"""

    @abstractmethod
    async def send_signup_to_organization_email(
        self,
        to: str,
        username_or_email: str,
        org_name: str,
        org_id: UUID,
        locale: Optional[str] = None,
    ) -> bool:
        """
        Tell a freshly added user they were invited to an organization.

        Raises:
            CollaboratorFailure: delivery failed
        """
        pass

"""
List Organization Users Use Case
"""

from typing import Iterable, List, Optional, Union
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork

from .dtos import OrganizationUserResponse


class ListOrganizationUsersUseCase:
    """Lists users of an organization, optionally filtered by email"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        organization_id: UUID,
        email_filter: Optional[Union[str, Iterable[str]]] = None,
    ) -> List[OrganizationUserResponse]:
        """
        Args:
            organization_id: Organization ID
            email_filter: None, a single email, or several emails

        Returns:
            Users of the organization (all of them when no filter is given)
        """
        if not email_filter:
            emails = set()
        elif isinstance(email_filter, str):
            emails = {email_filter}
        else:
            emails = set(email_filter)

        async with self.uow:
            members = await self.uow.organization_users.get_organization_users(
                organization_id, emails
            )
            return [
                OrganizationUserResponse.from_entity(member.user, member.profile)
                for member in members
            ]

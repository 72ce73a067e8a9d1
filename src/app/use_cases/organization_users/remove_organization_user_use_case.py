"""
Remove Organization User Use Case
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork

from .dtos import OrganizationUserResponse


class RemoveOrganizationUserUseCase:
    """
    Use case for removing a user from an organization.

    Not idempotent: removing an already removed user raises NotFoundError.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, organization_id: UUID, user_id: UUID) -> OrganizationUserResponse:
        async with self.uow:
            removed = await self.uow.organization_users.delete_organization_user(
                organization_id, user_id
            )
            response = OrganizationUserResponse.from_entity(removed.user, removed.profile)
            await self.uow.commit()
            return response

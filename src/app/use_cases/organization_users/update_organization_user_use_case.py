"""
Update Organization User Use Case
"""

from uuid import UUID

from src.app.errors import ConflictError, NotFoundError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MembershipRole

from .dtos import OrganizationUserResponse, UpdateOrganizationUserCommand
from .username_conflicts import check_for_username_conflicts


class UpdateOrganizationUserUseCase:
    """
    Use case for patching a user of an organization.

    Business Rules:
    - User must belong to the organization
    - A new username must be free in the organization; keeping one's own
      current username is never a conflict
    - organization_role / accepted update the membership
    - The OWNER membership cannot be demoted or un-accepted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, organization_id: UUID, user_id: UUID, command: UpdateOrganizationUserCommand
    ) -> OrganizationUserResponse:
        async with self.uow:
            member = await self.uow.organization_users.get_organization_user(
                organization_id, user_id
            )
            if member is None:
                raise NotFoundError("USER_NOT_FOUND", "User not found in this organization")

            patch = command.model_dump(exclude_unset=True, exclude_none=True)
            role = patch.pop("organization_role", None)
            accepted = patch.pop("accepted", None)

            if patch.get("username"):
                await check_for_username_conflicts(
                    self.uow, organization_id, patch["username"], exclude_user_id=user_id
                )

            if role is not None or accepted is not None:
                membership = await self.uow.memberships.get_by_user_and_organization(
                    user_id, organization_id
                )
                if membership is None:
                    raise NotFoundError(
                        "MEMBERSHIP_NOT_FOUND", "User has no membership in this organization"
                    )
                if membership.role == MembershipRole.owner and (
                    (role is not None and role != MembershipRole.owner) or accepted is False
                ):
                    raise ConflictError(
                        "CANNOT_DEMOTE_OWNER", "The organization owner cannot be demoted"
                    )
                if role is not None:
                    membership.role = role
                if accepted is not None:
                    membership.accepted = accepted
                await self.uow.memberships.update(membership)

            if patch:
                member = await self.uow.organization_users.update_organization_user(
                    organization_id, user_id, patch
                )

            await self.uow.commit()
            return OrganizationUserResponse.from_entity(member.user, member.profile)

"""
Create Organization With Existing Owner Use Case

Provisions an organization whose owner already has an account.
"""

import logging

from src.app.services.profile_service import ProfileService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Membership, MembershipRole

from .create_organization_use_case import create_organization
from .dtos import (
    CreateOrganizationWithExistingOwnerResponse,
    ExistingOwner,
    OrganizationData,
    OrganizationView,
    OwnerProfileView,
)

logger = logging.getLogger(__name__)


class CreateOrganizationWithExistingOwnerUseCase:
    """
    Use case for creating an organization owned by an existing user.

    Business Logic:
    1. Create Organization + OrganizationSettings
    2. Attach the owner's account to the organization (tenant-scoped profile)
    3. Create Membership with role=OWNER, accepted=True
    4. Commit all of the above in one transaction
    """

    def __init__(self, uow: UnitOfWork, team_billing_enabled: bool = False):
        self.uow = uow
        self.team_billing_enabled = team_billing_enabled

    async def execute(
        self, org_data: OrganizationData, owner: ExistingOwner
    ) -> CreateOrganizationWithExistingOwnerResponse:
        """
        Args:
            org_data: Organization attributes
            owner: Existing user's id, email and pre-organization username

        Returns:
            CreateOrganizationWithExistingOwnerResponse

        Raises:
            ConflictError: slug, domain or derived username already taken
            NotFoundError: owner user does not exist
        """
        logger.debug(
            f"create_with_existing_owner org_data={org_data.model_dump()} owner={owner.model_dump()}"
        )

        async with self.uow:
            organization, settings = await create_organization(
                self.uow, org_data, self.team_billing_enabled
            )

            owner_profile = await ProfileService(self.uow).create_profile_for_existing_user(
                user_id=owner.id,
                email=owner.email,
                current_username=owner.non_org_username,
                organization_id=organization.id,
            )

            # No invitation step for the founding owner
            await self.uow.memberships.create(
                Membership(
                    user_id=owner.id,
                    organization_id=organization.id,
                    role=MembershipRole.owner,
                    accepted=True,
                )
            )

            await self.uow.commit()

            logger.info(
                f"Organization {organization.id} created with existing owner {owner.id}"
            )
            return CreateOrganizationWithExistingOwnerResponse(
                organization=OrganizationView.from_entity(organization, settings),
                owner_profile=OwnerProfileView.from_entity(owner_profile),
            )

"""
Create Organization With New Owner Use Case

Provisions an organization together with a brand-new owner account.
"""

import logging

from src.app.errors import ConflictError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.organization_users.dtos import OrganizationUserResponse
from src.domain.entities import Membership, MembershipRole, Profile, User
from src.domain.usernames import get_org_username_from_email

from .create_organization_use_case import create_organization
from .dtos import (
    CreateOrganizationWithNewOwnerResponse,
    NewOwner,
    OrganizationData,
    OrganizationView,
    OwnerProfileView,
)

logger = logging.getLogger(__name__)


class CreateOrganizationWithNewOwnerUseCase:
    """
    Use case for creating an organization whose owner has no account yet.

    Business Logic:
    1. Reject emails that already belong to a user
    2. Create Organization + OrganizationSettings
    3. Derive the owner's username from email and auto-accept domain
    4. Create the User scoped to the organization, with its Profile
    5. Create Membership with role=OWNER, accepted=True
    6. Commit all of the above in one transaction
    """

    def __init__(self, uow: UnitOfWork, team_billing_enabled: bool = False):
        self.uow = uow
        self.team_billing_enabled = team_billing_enabled

    async def execute(
        self, org_data: OrganizationData, owner: NewOwner
    ) -> CreateOrganizationWithNewOwnerResponse:
        logger.debug(
            f"create_with_new_owner org_data={org_data.model_dump()} owner={owner.model_dump()}"
        )

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(owner.email)
            if existing_user:
                raise ConflictError("EMAIL_ALREADY_EXISTS", "A user already exists with that email")

            organization, settings = await create_organization(
                self.uow, org_data, self.team_billing_enabled
            )

            owner_username_in_org = get_org_username_from_email(
                owner.email, org_data.auto_accept_email
            )

            owner_in_db = await self.uow.users.create(
                User(
                    email=owner.email,
                    username=owner_username_in_org,
                    organization_id=organization.id,
                )
            )
            owner_profile = await self.uow.profiles.create(
                Profile(
                    user_id=owner_in_db.id,
                    organization_id=organization.id,
                    username=owner_username_in_org,
                )
            )

            await self.uow.memberships.create(
                Membership(
                    user_id=owner_in_db.id,
                    organization_id=organization.id,
                    role=MembershipRole.owner,
                    accepted=True,
                )
            )

            await self.uow.commit()

            logger.info(
                f"Organization {organization.id} created with new owner {owner_in_db.id}"
            )
            return CreateOrganizationWithNewOwnerResponse(
                org_owner=OrganizationUserResponse.from_entity(owner_in_db, owner_profile),
                organization=OrganizationView.from_entity(organization, settings),
                owner_profile=OwnerProfileView.from_entity(owner_profile),
            )

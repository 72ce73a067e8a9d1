"""
Add Organization User Use Case

Creates a new user directly inside an organization and notifies them.
"""

import logging

from src.app.errors import CollaboratorFailure, ConflictError
from src.app.services.email_service import IEmailService
from src.app.services.invitation_service import (
    NewUserInvitation,
    OrganizationInvitationService,
    OrgConnectInfo,
)
from src.app.services.unit_of_work import UnitOfWork

from .dtos import (
    USER_PROFILE_FIELDS,
    CreateOrganizationUserCommand,
    OrganizationRef,
    OrganizationUserResponse,
)
from .username_conflicts import check_for_username_conflicts

logger = logging.getLogger(__name__)


class AddOrganizationUserUseCase:
    """
    Use case for adding a user to an organization.

    Business Logic:
    1. Reject an email already used in the organization
    2. Reject a requested username already used in the organization
    3. Invite by username when given, otherwise by email
    4. Create the user through the batch invitation routine
    5. Merge remaining profile fields into the new user
    6. Commit
    7. Send the signup-to-organization email (best effort)
    """

    def __init__(self, uow: UnitOfWork, email_service: IEmailService):
        self.uow = uow
        self.email_service = email_service

    async def execute(
        self, organization: OrganizationRef, command: CreateOrganizationUserCommand
    ) -> OrganizationUserResponse:
        """
        Args:
            organization: Target organization (id, name)
            command: Email, optional username, role, auto-accept and profile fields

        Returns:
            OrganizationUserResponse for the created user

        Raises:
            ConflictError: email or username already used in the organization
        """
        async with self.uow:
            existing = await self.uow.organization_users.get_organization_user_by_email(
                organization.id, command.email
            )
            if existing:
                raise ConflictError("EMAIL_ALREADY_EXISTS", "A user already exists with that email")

            if command.username:
                await check_for_username_conflicts(self.uow, organization.id, command.username)

            username_or_email = command.username or command.email

            created_users = await OrganizationInvitationService(
                self.uow
            ).create_new_users_connect_to_org_if_exists(
                invitations=[
                    NewUserInvitation(
                        username_or_email=username_or_email,
                        role=command.organization_role,
                        email=command.email,
                    )
                ],
                team_id=organization.id,
                is_org=True,
                parent_id=None,
                auto_accept_email_domain=None,
                org_connect_info_by_username_or_email={
                    username_or_email: OrgConnectInfo(
                        org_id=organization.id, auto_accept=command.auto_accept
                    )
                },
            )
            created_user = created_users[0]

            update_data = command.model_dump(include=USER_PROFILE_FIELDS, exclude_none=True)
            if update_data:
                member = await self.uow.organization_users.update_organization_user(
                    organization.id, created_user.id, update_data
                )
            else:
                member = await self.uow.organization_users.get_organization_user(
                    organization.id, created_user.id
                )

            await self.uow.commit()
            response = OrganizationUserResponse.from_entity(member.user, member.profile)

        try:
            await self.email_service.send_signup_to_organization_email(
                to=response.email,
                username_or_email=username_or_email,
                org_name=organization.name,
                org_id=organization.id,
                locale=response.locale,
            )
        except CollaboratorFailure as exc:
            logger.warning(
                f"Signup email for user {response.id} in organization {organization.id} failed: "
                f"{exc.code} {exc.message}"
            )

        return response

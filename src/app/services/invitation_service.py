"""
Batch invitation routine

Creates user accounts for a list of invitations and connects them to a
team or organization.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, model_validator

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Membership, MembershipRole, Profile, User
from src.domain.usernames import get_org_username_from_email

logger = logging.getLogger(__name__)


class NewUserInvitation(BaseModel):
    """One invitation: an identifier (username or email) and the role to grant"""

    username_or_email: str
    role: MembershipRole = MembershipRole.member
    email: Optional[str] = None

    @model_validator(mode="after")
    def require_email(self) -> "NewUserInvitation":
        if self.email is None:
            if "@" not in self.username_or_email:
                raise ValueError("email is required when inviting by username")
            self.email = self.username_or_email
        return self


class OrgConnectInfo(BaseModel):
    """Organization linkage for an invited identifier"""

    org_id: UUID
    auto_accept: bool


class OrganizationInvitationService:
    """Creates new users from invitations; runs inside the caller's unit of work"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create_new_users_connect_to_org_if_exists(
        self,
        invitations: List[NewUserInvitation],
        team_id: UUID,
        is_org: bool,
        parent_id: Optional[UUID],
        auto_accept_email_domain: Optional[str],
        org_connect_info_by_username_or_email: Dict[str, OrgConnectInfo],
    ) -> List[User]:
        """
        Create one user per invitation and connect it to the team.

        Users joining an organization (is_org, or a team with a parent
        organization) get an organization-scoped username and a profile.
        The membership is accepted only when the connect info says so.

        Returns:
            Created users, in invitation order
        """
        is_becoming_an_org_member = is_org or parent_id is not None
        created_users: List[User] = []

        for invitation in invitations:
            connect_info = org_connect_info_by_username_or_email.get(
                invitation.username_or_email
            )
            org_id = connect_info.org_id if connect_info else None
            auto_accept = connect_info.auto_accept if connect_info else False

            if "@" in invitation.username_or_email:
                username = get_org_username_from_email(
                    invitation.username_or_email, auto_accept_email_domain
                )
            else:
                username = invitation.username_or_email

            user = await self.uow.users.create(
                User(
                    email=invitation.email,
                    username=username if is_becoming_an_org_member else None,
                    organization_id=org_id,
                    verified=True,
                    invited_to=team_id,
                )
            )

            if is_becoming_an_org_member and org_id is not None:
                await self.uow.profiles.create(
                    Profile(user_id=user.id, organization_id=org_id, username=username)
                )

            await self.uow.memberships.create(
                Membership(
                    user_id=user.id,
                    organization_id=team_id,
                    role=invitation.role,
                    accepted=auto_accept,
                )
            )

            logger.info(
                f"Invited user {user.id} to team {team_id} as {invitation.role.value} (accepted={auto_accept})"
            )
            created_users.append(user)

        return created_users

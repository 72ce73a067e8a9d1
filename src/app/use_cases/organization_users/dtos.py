"""
Organization User Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the organization users domain.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import MembershipRole, Profile, User

# Fields the invitation routine leaves unset on a new user
USER_PROFILE_FIELDS = {"name", "locale", "time_zone", "week_start", "bio", "avatar_url"}


# ============================================================================
# Command DTOs
# ============================================================================


class OrganizationRef(BaseModel):
    """Organization a user is added to"""

    id: UUID
    name: str


class CreateOrganizationUserCommand(BaseModel):
    """Command for adding a user to an organization"""

    email: str
    username: Optional[str] = None
    organization_role: MembershipRole = MembershipRole.member
    auto_accept: bool = True

    name: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    week_start: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None


class UpdateOrganizationUserCommand(BaseModel):
    """Command for patching a user of an organization; unset fields are untouched"""

    email: Optional[str] = None
    username: Optional[str] = None
    name: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    week_start: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None

    organization_role: Optional[MembershipRole] = None
    accepted: Optional[bool] = None


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationUserResponse(BaseModel):
    """User of an organization, with its tenant-scoped username"""

    id: str
    email: str
    username: Optional[str] = None
    name: Optional[str] = None
    locale: Optional[str] = None
    time_zone: Optional[str] = None
    week_start: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    organization_id: Optional[str] = None

    @classmethod
    def from_entity(cls, user: User, profile: Profile) -> "OrganizationUserResponse":
        return cls(
            id=str(user.id),
            email=user.email,
            username=profile.username,
            name=user.name,
            locale=user.locale,
            time_zone=user.time_zone,
            week_start=user.week_start,
            bio=user.bio,
            avatar_url=user.avatar_url,
            organization_id=str(profile.organization_id),
        )

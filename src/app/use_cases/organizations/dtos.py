"""
Organization Use Case DTOs (Data Transfer Objects)

All Command and Response classes for organization provisioning.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.app.use_cases.organization_users.dtos import OrganizationUserResponse
from src.domain.entities import (
    BillingPeriod,
    Organization,
    OrganizationMetadata,
    OrganizationSettings,
    Profile,
)


# ============================================================================
# Command DTOs
# ============================================================================


class OrganizationData(BaseModel):
    """Attributes of an organization to create"""

    name: str
    slug: str
    is_organization_configured: bool = False
    is_organization_admin_reviewed: bool = False
    auto_accept_email: str = ""
    seats: Optional[int] = None
    price_per_seat: Optional[int] = None
    is_platform: bool = False
    billing_period: Optional[BillingPeriod] = None

    @field_validator("auto_accept_email")
    @classmethod
    def normalize_domain(cls, value: str) -> str:
        return value.strip().lower()


class ExistingOwner(BaseModel):
    """Owner that already has an account"""

    id: UUID
    email: str
    non_org_username: Optional[str] = None


class NewOwner(BaseModel):
    """Owner without a prior account"""

    email: str


# ============================================================================
# Response DTOs
# ============================================================================


class OrganizationSettingsView(BaseModel):
    is_admin_reviewed: bool
    is_organization_verified: bool
    is_organization_configured: bool
    org_auto_accept_email: str

    @classmethod
    def from_entity(cls, settings: OrganizationSettings) -> "OrganizationSettingsView":
        return cls(
            is_admin_reviewed=settings.is_admin_reviewed,
            is_organization_verified=settings.is_organization_verified,
            is_organization_configured=settings.is_organization_configured,
            org_auto_accept_email=settings.org_auto_accept_email,
        )


class OrganizationView(BaseModel):
    """Organization with its metadata parsed into OrganizationMetadata"""

    id: str
    name: str
    slug: Optional[str] = None
    logo_url: Optional[str] = None
    is_platform: bool = False
    metadata: OrganizationMetadata
    settings: Optional[OrganizationSettingsView] = None

    @classmethod
    def from_entity(
        cls,
        organization: Organization,
        settings: Optional[OrganizationSettings] = None,
    ) -> "OrganizationView":
        return cls(
            id=str(organization.id),
            name=organization.name,
            slug=organization.slug,
            logo_url=organization.logo_url,
            is_platform=organization.is_platform,
            metadata=OrganizationMetadata.parse(organization.org_metadata),
            settings=OrganizationSettingsView.from_entity(settings) if settings else None,
        )


class OwnerProfileView(BaseModel):
    """Tenant-scoped identity of the organization owner"""

    username: str
    id: Optional[str] = None
    uid: Optional[str] = None
    organization_id: Optional[str] = None

    @classmethod
    def from_entity(cls, profile: Profile) -> "OwnerProfileView":
        return cls(
            username=profile.username,
            id=str(profile.id),
            uid=profile.uid,
            organization_id=str(profile.organization_id),
        )


class CreateOrganizationWithExistingOwnerResponse(BaseModel):
    organization: OrganizationView
    owner_profile: OwnerProfileView


class CreateOrganizationWithNewOwnerResponse(BaseModel):
    org_owner: OrganizationUserResponse
    organization: OrganizationView
    owner_profile: OwnerProfileView

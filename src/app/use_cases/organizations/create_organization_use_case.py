"""
Create Organization Use Case

Inserts an organization and its settings, applying the slug policy.
"""

import logging
from typing import Tuple

from src.app.errors import ConflictError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Organization, OrganizationMetadata, OrganizationSettings

from .dtos import OrganizationData, OrganizationView

logger = logging.getLogger(__name__)


async def create_organization(
    uow: UnitOfWork, org_data: OrganizationData, team_billing_enabled: bool
) -> Tuple[Organization, OrganizationSettings]:
    """
    Insert an organization with its settings inside an open unit of work.

    Slug policy: with team billing disabled the slug goes live immediately;
    with billing enabled it is only recorded as metadata.requested_slug and
    a later billing/approval step promotes it.

    Raises:
        ConflictError: SLUG_TAKEN or AUTO_ACCEPT_DOMAIN_TAKEN
    """
    if not team_billing_enabled and await uow.organizations.get_by_slug(org_data.slug):
        raise ConflictError("SLUG_TAKEN", "An organization with this slug already exists")

    if org_data.auto_accept_email:
        claimed = await uow.organizations.find_by_auto_accept_email(org_data.auto_accept_email)
        if claimed:
            raise ConflictError(
                "AUTO_ACCEPT_DOMAIN_TAKEN",
                "Another organization already auto-accepts this email domain",
            )

    metadata = OrganizationMetadata(
        requested_slug=org_data.slug if team_billing_enabled else None,
        org_seats=org_data.seats,
        org_price_per_seat=org_data.price_per_seat,
        is_platform=org_data.is_platform,
        billing_period=org_data.billing_period,
    )

    organization = Organization(
        name=org_data.name,
        slug=None if team_billing_enabled else org_data.slug,
        is_organization=True,
        is_platform=org_data.is_platform,
        org_metadata=metadata.to_json(),
    )
    settings = OrganizationSettings(
        organization_id=organization.id,
        is_admin_reviewed=org_data.is_organization_admin_reviewed,
        is_organization_verified=True,
        is_organization_configured=org_data.is_organization_configured,
        org_auto_accept_email=org_data.auto_accept_email,
    )

    organization = await uow.organizations.create(organization, settings)
    return organization, settings


class CreateOrganizationUseCase:
    """
    Use case for creating a bare organization (no owner attached).

    Business Rules:
    - Organization and settings are written together
    - Live slug must be unique; auto-accept domain must be unique
    - Settings start verified
    """

    def __init__(self, uow: UnitOfWork, team_billing_enabled: bool = False):
        self.uow = uow
        self.team_billing_enabled = team_billing_enabled

    async def execute(self, org_data: OrganizationData) -> OrganizationView:
        async with self.uow:
            organization, settings = await create_organization(
                self.uow, org_data, self.team_billing_enabled
            )
            await self.uow.commit()

            logger.info(f"Organization {organization.id} created ({organization.name!r})")
            return OrganizationView.from_entity(organization, settings)

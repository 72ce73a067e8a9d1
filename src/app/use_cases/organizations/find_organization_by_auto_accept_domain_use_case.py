"""
Find Organization By Auto-Accept Domain Use Case
"""

import logging
from typing import Optional

from src.app.errors import FatalIntegrityError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.usernames import get_email_domain

from .dtos import OrganizationView

logger = logging.getLogger(__name__)


class FindOrganizationByAutoAcceptDomainUseCase:
    """
    Finds the organization that auto-accepts an email's domain.

    Business Rules:
    - Domain is the substring after the last '@'
    - No domain, or no match: None
    - More than one match means the one-domain-per-organization invariant is
      broken in storage; never pick one, fail with FatalIntegrityError
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Optional[OrganizationView]:
        email_domain = get_email_domain(email).strip().lower()
        if not email_domain:
            return None

        async with self.uow:
            organizations = await self.uow.organizations.find_by_auto_accept_email(email_domain)

            if len(organizations) > 1:
                logger.critical(
                    f"Multiple organizations found with auto-accept domain {email_domain!r}: "
                    f"{[str(org.id) for org in organizations]}"
                )
                raise FatalIntegrityError(
                    "MULTIPLE_ORGANIZATIONS_FOR_DOMAIN",
                    "Multiple organizations found with the same auto accept email domain",
                )

            if not organizations:
                return None
            return OrganizationView.from_entity(organizations[0])

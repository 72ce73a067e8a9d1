"""
Use Cases

Organized into domain folders:
- organizations/: Organization provisioning and lookups
- organization_users/: Membership onboarding

Import from subdirectories for better organization.
"""

from .organizations import (
    CreateOrganizationUseCase,
    CreateOrganizationWithExistingOwnerUseCase,
    CreateOrganizationWithNewOwnerUseCase,
    FindOrganizationUseCase,
    FindOrganizationByAutoAcceptDomainUseCase,
)
from .organization_users import (
    ListOrganizationUsersUseCase,
    AddOrganizationUserUseCase,
    UpdateOrganizationUserUseCase,
    RemoveOrganizationUserUseCase,
)

__all__ = [
    # Organizations
    "CreateOrganizationUseCase",
    "CreateOrganizationWithExistingOwnerUseCase",
    "CreateOrganizationWithNewOwnerUseCase",
    "FindOrganizationUseCase",
    "FindOrganizationByAutoAcceptDomainUseCase",
    # Organization users
    "ListOrganizationUsersUseCase",
    "AddOrganizationUserUseCase",
    "UpdateOrganizationUserUseCase",
    "RemoveOrganizationUserUseCase",
]

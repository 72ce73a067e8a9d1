"""
Organization Provisioning Use Cases

Organization creation and lookups.
"""

from .create_organization_use_case import CreateOrganizationUseCase, create_organization
from .create_organization_with_existing_owner_use_case import (
    CreateOrganizationWithExistingOwnerUseCase,
)
from .create_organization_with_new_owner_use_case import (
    CreateOrganizationWithNewOwnerUseCase,
)
from .dtos import (
    CreateOrganizationWithExistingOwnerResponse,
    CreateOrganizationWithNewOwnerResponse,
    ExistingOwner,
    NewOwner,
    OrganizationData,
    OrganizationSettingsView,
    OrganizationView,
    OwnerProfileView,
)
from .find_organization_by_auto_accept_domain_use_case import (
    FindOrganizationByAutoAcceptDomainUseCase,
)
from .find_organization_use_case import FindOrganizationUseCase

__all__ = [
    "create_organization",
    "CreateOrganizationUseCase",
    "CreateOrganizationWithExistingOwnerUseCase",
    "CreateOrganizationWithNewOwnerUseCase",
    "FindOrganizationUseCase",
    "FindOrganizationByAutoAcceptDomainUseCase",
    "OrganizationData",
    "ExistingOwner",
    "NewOwner",
    "OrganizationView",
    "OrganizationSettingsView",
    "OwnerProfileView",
    "CreateOrganizationWithExistingOwnerResponse",
    "CreateOrganizationWithNewOwnerResponse",
]

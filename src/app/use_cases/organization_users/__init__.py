"""
Organization User Use Cases

Membership onboarding after an organization exists.
"""

from .add_organization_user_use_case import AddOrganizationUserUseCase
from .dtos import (
    CreateOrganizationUserCommand,
    OrganizationRef,
    OrganizationUserResponse,
    UpdateOrganizationUserCommand,
)
from .list_organization_users_use_case import ListOrganizationUsersUseCase
from .remove_organization_user_use_case import RemoveOrganizationUserUseCase
from .update_organization_user_use_case import UpdateOrganizationUserUseCase

__all__ = [
    "ListOrganizationUsersUseCase",
    "AddOrganizationUserUseCase",
    "UpdateOrganizationUserUseCase",
    "RemoveOrganizationUserUseCase",
    "CreateOrganizationUserCommand",
    "UpdateOrganizationUserCommand",
    "OrganizationRef",
    "OrganizationUserResponse",
]

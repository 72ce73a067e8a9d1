"""
Organization Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import BillingPeriod, MembershipRole

# Export all entities
from .organization import Organization
from .organization_metadata import OrganizationMetadata
from .organization_settings import OrganizationSettings
from .user import User
from .membership import Membership
from .profile import Profile

__all__ = [
    # Enums
    "BillingPeriod",
    "MembershipRole",
    # Entities
    "Organization",
    "OrganizationMetadata",
    "OrganizationSettings",
    "User",
    "Membership",
    "Profile",
]

"""
Organization Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within an organization"""

    owner = "OWNER"
    admin = "ADMIN"
    member = "MEMBER"


class BillingPeriod(str, Enum):
    """Billing period recorded in organization metadata"""

    monthly = "MONTHLY"
    annually = "ANNUALLY"

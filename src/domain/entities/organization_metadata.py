"""
OrganizationMetadata

Typed shape of the JSON metadata stored on an Organization.
"""

from typing import Optional

from pydantic import BaseModel

from .enums import BillingPeriod


class OrganizationMetadata(BaseModel):
    """Billing and slug-approval attributes, persisted opaquely"""

    requested_slug: Optional[str] = None
    org_seats: Optional[int] = None
    org_price_per_seat: Optional[int] = None
    is_platform: bool = False
    billing_period: Optional[BillingPeriod] = None

    @classmethod
    def parse(cls, raw: Optional[dict]) -> "OrganizationMetadata":
        """Parse stored metadata, ignoring keys this service does not own"""
        known = {k: v for k, v in (raw or {}).items() if k in cls.model_fields}
        return cls.model_validate(known)

    def to_json(self) -> dict:
        return self.model_dump(mode="json")

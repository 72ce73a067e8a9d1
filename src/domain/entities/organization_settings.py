"""
OrganizationSettings Entity

Per-organization review and auto-accept configuration.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Field, Index, SQLModel


class OrganizationSettings(SQLModel, table=True):
    """
    OrganizationSettings entity - one row per organization.

    Business Rules:
    - Created in the same write as its Organization
    - A non-empty org_auto_accept_email is unique across ALL organizations
      (partial unique index, empty string means "no auto-accept")
    """

    __tablename__ = "organization_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, unique=True
    )

    is_admin_reviewed: bool = Field(default=False)
    is_organization_verified: bool = Field(default=False)
    is_organization_configured: bool = Field(default=False)
    org_auto_accept_email: str = Field(default="", max_length=255)

    __table_args__ = (
        Index(
            "uq_org_settings_auto_accept_email",
            "org_auto_accept_email",
            unique=True,
            sqlite_where=text("org_auto_accept_email != ''"),
            postgresql_where=text("org_auto_accept_email != ''"),
        ),
    )

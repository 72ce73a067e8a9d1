"""
Organization Entity

A team record flagged as a multi-user tenant container.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel


class Organization(SQLModel, table=True):
    """
    Organization entity - tenant container for users.

    Business Rules:
    - Created once, together with its OrganizationSettings
    - slug is the live public slug; when team billing is enabled it stays
      empty and the slug waits in org_metadata["requested_slug"]
    - org_metadata holds the serialized OrganizationMetadata
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: Optional[str] = Field(default=None, unique=True, index=True, max_length=255)
    logo_url: Optional[str] = Field(default=None, max_length=1024)

    is_organization: bool = Field(default=True)
    is_platform: bool = Field(default=False)

    org_metadata: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_organization_is_organization", "is_organization"),)

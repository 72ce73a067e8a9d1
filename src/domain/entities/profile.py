"""
Profile Entity

Binds a User to an Organization under a tenant-scoped username.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Profile(SQLModel, table=True):
    """
    Profile entity - tenant-scoped identity of a user.

    Business Rules:
    - (organization_id, username) must be unique
    - (user_id, organization_id) must be unique
    - previous_username keeps the pre-organization username of a moved user
    """

    __tablename__ = "profiles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    uid: str = Field(default_factory=lambda: str(uuid4()), unique=True, max_length=64)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )

    username: str = Field(max_length=255)
    previous_username: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("uq_profile_org_username", "organization_id", "username", unique=True),
        Index("uq_profile_user_org", "user_id", "organization_id", unique=True),
    )

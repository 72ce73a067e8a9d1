"""
User Entity

Represents a person; usernames are scoped to an organization.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class User(SQLModel, table=True):
    """
    User entity - identity record.

    Business Rules:
    - Email must be unique across all users
    - Username is unique only within organization_id
    - organization_id is set for accounts created inside an organization
    - moved_to_profile_id is set when an existing user is attached to an org
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    username: Optional[str] = Field(default=None, max_length=255)

    organization_id: Optional[UUID] = Field(
        default=None, foreign_key="organizations.id", index=True
    )

    # Profile fields
    name: Optional[str] = Field(default=None, max_length=255)
    locale: Optional[str] = Field(default="en", max_length=32)
    time_zone: str = Field(default="Europe/London", max_length=64)
    week_start: str = Field(default="Sunday", max_length=16)
    bio: Optional[str] = None
    avatar_url: Optional[str] = Field(default=None, max_length=1024)

    verified: bool = Field(default=False)
    invited_to: Optional[UUID] = Field(default=None)
    moved_to_profile_id: Optional[UUID] = Field(default=None)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("uq_user_org_username", "organization_id", "username", unique=True),
    )

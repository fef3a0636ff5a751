"""
Account Entity

A registered identity with credentials.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from vidshare.domain.base import utcnow


class Account(SQLModel, table=True):
    """
    Account entity - a registered user identity.

    Business Rules:
    - Email is unique and stored normalized (trimmed, lower-cased)
    - Password stored as bcrypt hash, never returned to callers
    - At most one active reset token; setting a new one overwrites the old
    - Reset token is stored as its SHA-256 digest, always paired with an expiry
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    display_name: str = Field(default="", max_length=100)
    profile_image: Optional[str] = Field(default=None, max_length=2048)

    # Password reset (single active token)
    reset_token_hash: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    reset_token_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_created_at", "created_at"),)

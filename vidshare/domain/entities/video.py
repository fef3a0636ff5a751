"""
Video Entity

Catalogue entry for a video hosted on the external media host.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from vidshare.domain.base import utcnow

VIDEO_DEFAULT_WIDTH = 120
VIDEO_DEFAULT_HEIGHT = 180


class Video(SQLModel, table=True):
    """
    Video entity - metadata only, media bytes live on the media host.

    Business Rules:
    - video_url and thumbnail_url point at the media host
    - Transformation defaults to 120x180, quality optional (1..100)
    - Deleted together with the owning account
    """

    __tablename__ = "videos"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(max_length=5000)
    video_url: str = Field(max_length=2048)
    thumbnail_url: str = Field(max_length=2048)
    controls: bool = Field(default=True)

    # Player transformation
    width: int = Field(default=VIDEO_DEFAULT_WIDTH)
    height: int = Field(default=VIDEO_DEFAULT_HEIGHT)
    quality: Optional[int] = Field(default=None)

    owner_id: Optional[UUID] = Field(default=None, foreign_key="accounts.id")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_video_owner_id", "owner_id"),
        Index("idx_video_created_at", "created_at"),
    )

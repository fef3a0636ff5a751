"""
Video Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, HttpUrl

from vidshare.domain.entities import VIDEO_DEFAULT_HEIGHT, VIDEO_DEFAULT_WIDTH, Video


class Transformation(BaseModel):
    """Player transformation applied by the media host"""

    height: int = Field(default=VIDEO_DEFAULT_HEIGHT, gt=0)
    width: int = Field(default=VIDEO_DEFAULT_WIDTH, gt=0)
    quality: Optional[int] = Field(default=None, ge=1, le=100)


class CreateVideoCommand(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=5000)
    video_url: HttpUrl
    thumbnail_url: HttpUrl
    controls: bool = True
    transformation: Transformation = Field(default_factory=Transformation)


class VideoResponse(BaseModel):
    id: str
    title: str
    description: str
    video_url: str
    thumbnail_url: str
    controls: bool
    transformation: Transformation
    owner_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, video: Video) -> "VideoResponse":
        return cls(
            id=str(video.id),
            title=video.title,
            description=video.description,
            video_url=video.video_url,
            thumbnail_url=video.thumbnail_url,
            controls=video.controls,
            transformation=Transformation(
                height=video.height, width=video.width, quality=video.quality
            ),
            owner_id=str(video.owner_id) if video.owner_id else None,
            created_at=video.created_at,
            updated_at=video.updated_at,
        )


class VideoListResponse(BaseModel):
    videos: List[VideoResponse]


class DeleteVideoResponse(BaseModel):
    message: str

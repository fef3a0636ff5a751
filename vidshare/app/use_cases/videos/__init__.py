"""
Video Use Cases
"""

from .list_videos_use_case import ListVideosUseCase
from .get_video_use_case import GetVideoUseCase
from .create_video_use_case import CreateVideoUseCase
from .delete_video_use_case import DeleteVideoUseCase
from .dtos import (
    CreateVideoCommand,
    DeleteVideoResponse,
    Transformation,
    VideoListResponse,
    VideoResponse,
)

__all__ = [
    "ListVideosUseCase",
    "GetVideoUseCase",
    "CreateVideoUseCase",
    "DeleteVideoUseCase",
    "CreateVideoCommand",
    "DeleteVideoResponse",
    "Transformation",
    "VideoListResponse",
    "VideoResponse",
]

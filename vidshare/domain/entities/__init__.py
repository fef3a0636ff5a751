"""
vidshare Domain Entities

Each entity in its own file.
"""

from .account import Account
from .video import Video, VIDEO_DEFAULT_HEIGHT, VIDEO_DEFAULT_WIDTH

__all__ = [
    "Account",
    "Video",
    "VIDEO_DEFAULT_HEIGHT",
    "VIDEO_DEFAULT_WIDTH",
]

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from vidshare.domain.entities import Video


class IVideoRepository(ABC):
    """Video repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, video_id: UUID) -> Optional[Video]:
        """Get video by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Video]:
        """List all videos, newest first"""
        pass

    @abstractmethod
    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count videos, optionally only those created since a point in time"""
        pass

    @abstractmethod
    async def create(self, video: Video) -> Video:
        """Create a new video"""
        pass

    @abstractmethod
    async def delete(self, video: Video) -> None:
        """Delete a video"""
        pass

    @abstractmethod
    async def delete_by_owner_id(self, owner_id: UUID) -> int:
        """Delete every video owned by an account, returning the count"""
        pass

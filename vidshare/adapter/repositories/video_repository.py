from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from vidshare.app.repositories.video_repository import IVideoRepository
from vidshare.domain.entities import Video


class VideoRepository(IVideoRepository):
    """Video repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, video_id: UUID) -> Optional[Video]:
        """Get video by ID"""
        stmt = select(Video).where(Video.id == video_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Video]:
        stmt = select(Video).order_by(Video.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self, created_since: Optional[datetime] = None) -> int:
        stmt = select(func.count()).select_from(Video)
        if created_since is not None:
            stmt = stmt.where(Video.created_at >= created_since)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, video: Video) -> Video:
        """Create a new video"""
        self.session.add(video)
        await self.session.flush()
        await self.session.refresh(video)
        return video

    async def delete(self, video: Video) -> None:
        await self.session.delete(video)
        await self.session.flush()

    async def delete_by_owner_id(self, owner_id: UUID) -> int:
        stmt = (
            delete(Video)
            .where(Video.owner_id == owner_id)
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

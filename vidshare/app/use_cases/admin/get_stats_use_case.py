from datetime import timedelta

from pydantic import BaseModel

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import utcnow
from vidshare.libs.result import Result, Return

RECENT_WINDOW = timedelta(days=7)


class StatsResponse(BaseModel):
    total_users: int
    total_videos: int
    recent_users: int
    recent_videos: int


class GetStatsUseCase:
    """Totals plus creations within the last seven days"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[StatsResponse]:
        since = utcnow() - RECENT_WINDOW
        async with self.uow:
            return Return.ok(
                StatsResponse(
                    total_users=await self.uow.accounts.count(),
                    total_videos=await self.uow.videos.count(),
                    recent_users=await self.uow.accounts.count(created_since=since),
                    recent_videos=await self.uow.videos.count(created_since=since),
                )
            )

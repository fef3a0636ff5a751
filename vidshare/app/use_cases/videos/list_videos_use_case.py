from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.libs.result import Result, Return
from .dtos import VideoListResponse, VideoResponse


class ListVideosUseCase:
    """Video feed, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[VideoListResponse]:
        async with self.uow:
            videos = await self.uow.videos.list_all()
            return Return.ok(
                VideoListResponse(videos=[VideoResponse.from_entity(v) for v in videos])
            )

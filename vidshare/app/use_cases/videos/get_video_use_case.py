from uuid import UUID

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.libs.result import Error, Result, Return
from .dtos import VideoResponse


class GetVideoUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, video_id: UUID) -> Result[VideoResponse]:
        async with self.uow:
            video = await self.uow.videos.get_by_id(video_id)
            if video is None:
                return Return.err(Error("VIDEO_NOT_FOUND", "Video not found"))
            return Return.ok(VideoResponse.from_entity(video))

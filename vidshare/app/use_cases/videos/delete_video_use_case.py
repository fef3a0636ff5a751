from uuid import UUID

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.libs.result import Error, Result, Return
from .dtos import DeleteVideoResponse


class DeleteVideoUseCase:
    """
    Delete a video.

    Business Rules:
    - Owners may delete their own videos
    - Moderators (bypass_ownership) may delete any video
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        video_id: UUID,
        requester_id: UUID,
        bypass_ownership: bool = False,
    ) -> Result[DeleteVideoResponse]:
        async with self.uow:
            video = await self.uow.videos.get_by_id(video_id)
            if video is None:
                return Return.err(Error("VIDEO_NOT_FOUND", "Video not found"))

            if not bypass_ownership and video.owner_id != requester_id:
                return Return.err(
                    Error("FORBIDDEN", "Only the owner can delete this video")
                )

            await self.uow.videos.delete(video)
            await self.uow.commit()

            return Return.ok(DeleteVideoResponse(message="Video deleted successfully"))

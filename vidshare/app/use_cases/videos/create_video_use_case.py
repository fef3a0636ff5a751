import logging
from uuid import UUID

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.entities import Video
from vidshare.libs.result import Result, Return
from .dtos import CreateVideoCommand, VideoResponse

logger = logging.getLogger(__name__)


class CreateVideoUseCase:
    """
    Register a video whose media was already uploaded to the media host.

    The caller becomes the owner.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, owner_id: UUID, command: CreateVideoCommand) -> Result[VideoResponse]:
        async with self.uow:
            video = Video(
                title=command.title.strip(),
                description=command.description.strip(),
                video_url=str(command.video_url),
                thumbnail_url=str(command.thumbnail_url),
                controls=command.controls,
                width=command.transformation.width,
                height=command.transformation.height,
                quality=command.transformation.quality,
                owner_id=owner_id,
            )
            video = await self.uow.videos.create(video)
            await self.uow.commit()

            logger.info(f"Video {video.id} created by {owner_id}")
            return Return.ok(VideoResponse.from_entity(video))

"""
Unit tests for video and admin statistics use cases
"""

from uuid import uuid4

import pytest

from vidshare.app.use_cases.admin import GetStatsUseCase
from vidshare.app.use_cases.videos import (
    CreateVideoCommand,
    CreateVideoUseCase,
    DeleteVideoUseCase,
    GetVideoUseCase,
)
from vidshare.domain.entities import Video


def make_video(owner_id=None) -> Video:
    return Video(
        id=uuid4(),
        title="Sunset",
        description="Timelapse",
        video_url="https://media.example.com/videos/sunset.mp4",
        thumbnail_url="https://media.example.com/videos/sunset.jpg",
        owner_id=owner_id,
    )


@pytest.mark.asyncio
async def test_create_video_defaults_transformation(mock_uow):
    owner_id = uuid4()
    command = CreateVideoCommand(
        title=" Sunset ",
        description="Timelapse",
        video_url="https://media.example.com/videos/sunset.mp4",
        thumbnail_url="https://media.example.com/videos/sunset.jpg",
    )

    result = await CreateVideoUseCase(mock_uow).execute(owner_id, command)

    assert result.is_ok()
    video = result.value
    assert video.title == "Sunset"
    assert video.owner_id == str(owner_id)
    assert video.controls is True
    assert video.transformation.width == 120
    assert video.transformation.height == 180
    assert video.transformation.quality is None
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_get_missing_video(mock_uow):
    result = await GetVideoUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "VIDEO_NOT_FOUND"


@pytest.mark.asyncio
async def test_owner_deletes_video(mock_uow):
    owner_id = uuid4()
    video = make_video(owner_id)
    mock_uow.videos.get_by_id.return_value = video

    result = await DeleteVideoUseCase(mock_uow).execute(video.id, requester_id=owner_id)

    assert result.is_ok()
    mock_uow.videos.delete.assert_called_once_with(video)


@pytest.mark.asyncio
async def test_non_owner_cannot_delete_video(mock_uow):
    video = make_video(uuid4())
    mock_uow.videos.get_by_id.return_value = video

    result = await DeleteVideoUseCase(mock_uow).execute(video.id, requester_id=uuid4())

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.videos.delete.assert_not_called()


@pytest.mark.asyncio
async def test_moderator_deletes_any_video(mock_uow):
    video = make_video(None)
    mock_uow.videos.get_by_id.return_value = video

    result = await DeleteVideoUseCase(mock_uow).execute(
        video.id, requester_id=uuid4(), bypass_ownership=True
    )

    assert result.is_ok()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_stats_counts_totals_and_recent(mock_uow):
    async def count_accounts(created_since=None):
        return 2 if created_since else 10

    async def count_videos(created_since=None):
        return 1 if created_since else 4

    mock_uow.accounts.count.side_effect = count_accounts
    mock_uow.videos.count.side_effect = count_videos

    result = await GetStatsUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.model_dump() == {
        "total_users": 10,
        "total_videos": 4,
        "recent_users": 2,
        "recent_videos": 1,
    }

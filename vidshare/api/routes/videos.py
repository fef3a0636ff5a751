from uuid import UUID

from fastapi import APIRouter, Depends, status

from vidshare.api.error import ClientError, ServerError
from vidshare.app.services.authorization_gate import AuthorizationGate
from vidshare.app.services.session_issuer import SessionClaim
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.app.use_cases.videos import (
    CreateVideoCommand,
    CreateVideoUseCase,
    DeleteVideoResponse,
    DeleteVideoUseCase,
    GetVideoUseCase,
    ListVideosUseCase,
    VideoListResponse,
    VideoResponse,
)
from vidshare.depends import get_authorization_gate, get_current_claim, get_unit_of_work

router = APIRouter(prefix="/videos", tags=["Videos"])


@router.get("", status_code=status.HTTP_200_OK, response_model=VideoListResponse)
async def list_videos(
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Video feed, newest first"""
    result = await ListVideosUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=VideoResponse)
async def create_video(
    request: CreateVideoCommand,
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Video

    Media is uploaded to the media host beforehand; this stores the metadata
    with the caller as owner.
    """
    result = await CreateVideoUseCase(uow).execute(UUID(claim.account_id), request)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/{video_id}", status_code=status.HTTP_200_OK, response_model=VideoResponse)
async def get_video(
    video_id: UUID,
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: VIDEO_NOT_FOUND
    """
    result = await GetVideoUseCase(uow).execute(video_id)

    if result.is_err():
        error = result.error
        if error.code == "VIDEO_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete("/{video_id}", status_code=status.HTTP_200_OK, response_model=DeleteVideoResponse)
async def delete_video(
    video_id: UUID,
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gate: AuthorizationGate = Depends(get_authorization_gate),
):
    """
    Delete Video

    Owners delete their own videos; admins may delete any.

    Raises:
        - 403 Forbidden: Not the owner
        - 404 Not Found: VIDEO_NOT_FOUND
    """
    use_case = DeleteVideoUseCase(uow)
    result = await use_case.execute(
        video_id,
        requester_id=UUID(claim.account_id),
        bypass_ownership=gate.is_admin(claim.email),
    )

    if result.is_err():
        error = result.error
        if error.code == "VIDEO_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value

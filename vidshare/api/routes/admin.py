"""
Admin API Routes - User and Video Moderation

Every endpoint requires a valid session (401 otherwise) AND an email on the
operator-configured admin list (403 otherwise).
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from vidshare.api.error import ClientError, ServerError
from vidshare.app.services.session_issuer import SessionClaim
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.app.use_cases.admin import (
    DeleteUserResponse,
    DeleteUserUseCase,
    GetStatsUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    StatsResponse,
)
from vidshare.app.use_cases.videos import (
    DeleteVideoResponse,
    DeleteVideoUseCase,
    ListVideosUseCase,
    VideoListResponse,
)
from vidshare.depends import get_unit_of_work, require_admin

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/users", status_code=status.HTTP_200_OK, response_model=ListUsersResponse)
async def list_users(
    admin: SessionClaim = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Newest first; password hashes and reset tokens are never included.
    """
    result = await ListUsersUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.delete("/users/{user_id}", status_code=status.HTTP_200_OK, response_model=DeleteUserResponse)
async def delete_user(
    user_id: UUID,
    admin: SessionClaim = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User

    Raises:
        - 400 Bad Request: CANNOT_DELETE_SELF
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    use_case = DeleteUserUseCase(uow)
    result = await use_case.execute(user_id, UUID(admin.account_id), admin.email)

    if result.is_err():
        error = result.error
        if error.code == "CANNOT_DELETE_SELF":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/videos", status_code=status.HTTP_200_OK, response_model=VideoListResponse)
async def list_videos(
    admin: SessionClaim = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListVideosUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.delete("/videos/{video_id}", status_code=status.HTTP_200_OK, response_model=DeleteVideoResponse)
async def delete_video(
    video_id: UUID,
    admin: SessionClaim = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Video (moderation, ignores ownership)

    Raises:
        - 404 Not Found: VIDEO_NOT_FOUND
    """
    use_case = DeleteVideoUseCase(uow)
    result = await use_case.execute(
        video_id, requester_id=UUID(admin.account_id), bypass_ownership=True
    )

    if result.is_err():
        error = result.error
        if error.code == "VIDEO_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=StatsResponse)
async def stats(
    admin: SessionClaim = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Total users/videos and those created in the last 7 days"""
    result = await GetStatsUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value

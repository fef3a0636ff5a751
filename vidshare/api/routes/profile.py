from uuid import UUID

from fastapi import APIRouter, Depends, status

from vidshare.api.error import ClientError, ServerError
from vidshare.app.services.session_issuer import SessionClaim
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.app.use_cases.profile import (
    ProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from vidshare.depends import get_current_claim, get_unit_of_work

router = APIRouter(tags=["Profile"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=SessionClaim)
async def get_me(claim: SessionClaim = Depends(get_current_claim)):
    """
    Current Session

    Returns the claim exactly as signed; values may be stale relative to
    later profile edits until the session is re-issued.
    """
    return claim


@router.patch("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileCommand,
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Own Profile

    Raises:
        - 401 Unauthorized: No valid session
        - 404 Not Found: Account no longer exists
    """
    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(UUID(claim.account_id), request)

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value

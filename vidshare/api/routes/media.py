import logging

from fastapi import APIRouter, Depends, status

from vidshare.api.error import ServerError
from vidshare.app.services.media_upload_signer import (
    MediaNotConfigured,
    MediaUploadSigner,
    UploadAuthParams,
)
from vidshare.app.services.session_issuer import SessionClaim
from vidshare.depends import get_current_claim, get_media_upload_signer
from vidshare.libs.result import Error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/media", tags=["Media"])


@router.get("/upload-auth", status_code=status.HTTP_200_OK, response_model=UploadAuthParams)
async def upload_auth(
    claim: SessionClaim = Depends(get_current_claim),
    signer: MediaUploadSigner = Depends(get_media_upload_signer),
):
    """
    Media Upload Authentication

    Short-lived signed parameters for a direct browser upload to the media host.

    Raises:
        - 401 Unauthorized: No valid session
        - 500 Internal Server Error: MEDIA_NOT_CONFIGURED
    """
    try:
        params = signer.sign()
    except MediaNotConfigured as exc:
        raise ServerError(Error("MEDIA_NOT_CONFIGURED", str(exc)))

    logger.info(f"Upload auth issued for account {claim.account_id}")
    return params

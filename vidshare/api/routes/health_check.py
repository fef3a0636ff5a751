from fastapi import APIRouter, status

from vidshare import __version__

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health():
    return {"status": "ok", "version": __version__}

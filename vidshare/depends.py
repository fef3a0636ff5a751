from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from vidshare.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from vidshare.api.error import ClientError
from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.authorization_gate import AuthorizationGate
from vidshare.app.services.media_upload_signer import MediaUploadSigner
from vidshare.app.services.password_reset_notifier import IPasswordResetNotifier
from vidshare.app.services.session_issuer import SessionClaim, SessionIssuer
from vidshare.libs.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_auth_settings(request: Request) -> AuthSettings:
    return request.app.state.auth_settings


def get_session_issuer(request: Request) -> SessionIssuer:
    return request.app.state.session_issuer


def get_authorization_gate(request: Request) -> AuthorizationGate:
    return request.app.state.authorization_gate


def get_password_reset_notifier(request: Request) -> IPasswordResetNotifier:
    return request.app.state.password_reset_notifier


def get_media_upload_signer(request: Request) -> MediaUploadSigner:
    return request.app.state.media_upload_signer


def extract_session_token(request: Request, cookie_name: str) -> Optional[str]:
    """Bearer header first, then the session cookie set at login"""
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(cookie_name) or None


async def get_current_claim(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: AuthSettings = Depends(get_auth_settings),
    issuer: SessionIssuer = Depends(get_session_issuer),
) -> SessionClaim:
    """
    Dependency resolving the session claim from bearer token or cookie.

    Reuses the claim the authorization gate already resolved for protected
    paths; paths the gate passes without a claim (/auth/*) are resolved here.

    Raises:
        ClientError: 401 UNAUTHENTICATED if the token is missing, tampered or expired
    """
    claim = getattr(request.state, "session_claim", None)
    if claim is None:
        token = credentials.credentials if credentials else request.cookies.get(settings.cookie_name)
        claim = issuer.resolve(token) if token else None

    if claim is None:
        raise ClientError(
            Error("UNAUTHENTICATED", "Invalid or expired session"),
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )

    return claim


async def require_admin(
    claim: SessionClaim = Depends(get_current_claim),
    gate: AuthorizationGate = Depends(get_authorization_gate),
) -> SessionClaim:
    """
    Session first (401), then admin membership (403).

    Raises:
        ClientError: 403 FORBIDDEN for authenticated callers outside the admin list
    """
    if not gate.is_admin(claim.email):
        raise ClientError(
            Error("FORBIDDEN", "Admin access required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return claim

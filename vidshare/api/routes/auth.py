from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, Response, status
from pydantic import BaseModel, EmailStr, Field

from vidshare.api.error import ClientError, ServerError
from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.password_reset_notifier import IPasswordResetNotifier
from vidshare.app.services.session_issuer import SessionClaim, SessionIssuer
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.app.use_cases.auth import (
    CompletePasswordResetUseCase,
    DeleteAccountUseCase,
    LoginUseCase,
    MessageResponse,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    ReissueSessionUseCase,
    RequestPasswordResetUseCase,
    SessionResponse,
    VerifyResetTokenUseCase,
)
from vidshare.depends import (
    get_auth_settings,
    get_current_claim,
    get_password_reset_notifier,
    get_session_issuer,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _set_session_cookie(response: Response, settings: AuthSettings, session: SessionResponse):
    response.set_cookie(
        key=settings.cookie_name,
        value=session.access_token,
        max_age=int(settings.session_ttl.total_seconds()),
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


def _clear_session_cookie(response: Response, settings: AuthSettings):
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Password policy is enforced by the use case so the configured minimum
    length stays in one place.
    """

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Register

    Raises:
        - 400 Bad Request: Invalid input or weak password
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(email=request.email, password=request.password)

    use_case = RegisterUseCase(uow, settings)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_INPUT", "WEAK_PASSWORD", "PASSWORD_TOO_LONG"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=SessionResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    issuer: SessionIssuer = Depends(get_session_issuer),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Login

    Returns the signed session token and also sets it as an HttpOnly cookie.

    Raises:
        - 401 Unauthorized: Invalid credentials (same for unknown email)
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, issuer, settings)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    _set_session_cookie(response, settings, result.value)
    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    response: Response,
    claim: SessionClaim = Depends(get_current_claim),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Logout

    Client-side discard only: the cookie is cleared, but a copied token
    stays valid until it expires.
    """
    _clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out")


@router.post("/session", status_code=status.HTTP_200_OK, response_model=SessionResponse)
async def reissue_session(
    response: Response,
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
    issuer: SessionIssuer = Depends(get_session_issuer),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Re-issue Session

    Signs a fresh claim from the stored account, e.g. after a profile update.

    Raises:
        - 401 Unauthorized: No valid session
        - 404 Not Found: Account no longer exists
    """
    use_case = ReissueSessionUseCase(uow, issuer)
    result = await use_case.execute(UUID(claim.account_id))

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    _set_session_cookie(response, settings, result.value)
    return result.value


class ForgotPasswordRequest(BaseModel):
    """Password reset request payload"""

    email: EmailStr = Field(..., description="Account email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: IPasswordResetNotifier = Depends(get_password_reset_notifier),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Request Password Reset

    Security:
        - Same response whether or not the email exists
        - Delivery failures are logged, not returned

    Returns:
        - 200 OK: Always, for any well-formed email
        - 400 Bad Request: Missing email
    """
    use_case = RequestPasswordResetUseCase(uow, notifier, settings)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_INPUT":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def verify_reset_token(
    token: Optional[str] = Query(None, description="Password reset token"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Verify Reset Token

    Raises:
        - 400 Bad Request: Missing, invalid or expired token
    """
    use_case = VerifyResetTokenUseCase(uow)
    result = await use_case.execute(token or "")

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_INPUT", "INVALID_OR_EXPIRED_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Complete password reset payload"""

    token: str = Field(..., description="Password reset token from email")
    new_password: str = Field(..., description="New password")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Complete Password Reset

    Security:
        - Token must match and be unexpired
        - Token is cleared in the same update that replaces the password

    Raises:
        - 400 Bad Request: Invalid/expired token or weak password
    """
    use_case = CompletePasswordResetUseCase(uow, settings)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in (
            "INVALID_INPUT", "WEAK_PASSWORD", "PASSWORD_TOO_LONG", "INVALID_OR_EXPIRED_TOKEN"
        ):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class DeleteAccountRequest(BaseModel):
    password: str = Field("", description="Current password")


@router.delete("/delete-account", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_account(
    response: Response,
    request: DeleteAccountRequest = Body(...),
    claim: SessionClaim = Depends(get_current_claim),
    uow: UnitOfWork = Depends(get_unit_of_work),
    settings: AuthSettings = Depends(get_auth_settings),
):
    """
    Delete Own Account

    Deletes the account and its videos, then clears the session cookie.

    Raises:
        - 401 Unauthorized: No valid session
        - 400 Bad Request: Missing or wrong password
        - 404 Not Found: Account no longer exists
    """
    use_case = DeleteAccountUseCase(uow)
    result = await use_case.execute(UUID(claim.account_id), request.password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_INPUT", "INVALID_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    _clear_session_cookie(response, settings)
    return result.value

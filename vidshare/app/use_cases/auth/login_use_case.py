"""
Login Use Case

Verifies credentials and issues a signed session claim.
"""

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.passwords import check_dummy_password, check_password
from vidshare.app.services.session_issuer import SessionIssuer
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import normalize_email
from vidshare.libs.result import Error, Result, Return
from .dtos import SessionResponse


class LoginUseCase:
    """
    Use case for login and session issuance.

    Business Rules:
    - Unknown email and wrong password produce the same INVALID_CREDENTIALS
    - A bcrypt check always runs so timing does not reveal unknown emails
    - Claim TTL is absolute from issuance (no refresh-on-activity)
    """

    def __init__(self, uow: UnitOfWork, issuer: SessionIssuer, settings: AuthSettings):
        self.uow = uow
        self.issuer = issuer
        self.settings = settings

    async def execute(self, email: str, password: str) -> Result[SessionResponse]:
        """
        Execute login use case.

        Args:
            email: Email as typed by the user
            password: Plain text password

        Returns:
            Result with SessionResponse, or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_email(normalize_email(email))

            if account is None:
                check_dummy_password(password, self.settings.bcrypt_rounds)
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

            if not check_password(password, account.password_hash):
                return Return.err(Error("INVALID_CREDENTIALS", "Invalid email or password"))

            token, claim = self.issuer.issue(account)
            return Return.ok(
                SessionResponse(access_token=token, expires_at=claim.expires_at, claim=claim)
            )

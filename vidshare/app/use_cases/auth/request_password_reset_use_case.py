"""
Request Password Reset Use Case

Generates a single-use reset token and hands the reset link to the notifier.
"""

import logging

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.password_reset_notifier import IPasswordResetNotifier
from vidshare.app.services.passwords import generate_reset_token
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import normalize_email, utcnow
from vidshare.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

GENERIC_RESET_MESSAGE = (
    "If an account with this email exists, a password reset link has been sent."
)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - 256-bit random token, only its SHA-256 digest is stored
    - Token expires after the configured window (10 minutes)
    - A new request overwrites any previous token for the account
    - Same response whether or not the email exists (no enumeration)
    - Delivery failures are logged, never returned to the caller
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: IPasswordResetNotifier,
        settings: AuthSettings,
    ):
        self.uow = uow
        self.notifier = notifier
        self.settings = settings

    async def execute(self, email: str) -> Result[MessageResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Email address as submitted

        Returns:
            Result with the generic message, or Error(INVALID_INPUT) for a
            blank email
        """
        email = normalize_email(email or "")
        if not email:
            return Return.err(Error("INVALID_INPUT", "Email is required"))

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                return Return.ok(MessageResponse(message=GENERIC_RESET_MESSAGE))

            account_id = account.id
            reset_token, token_hash = generate_reset_token()
            now = utcnow()
            account.reset_token_hash = token_hash
            account.reset_token_expires_at = now + self.settings.reset_token_ttl
            account.updated_at = now
            await self.uow.accounts.update(account)
            await self.uow.commit()

        # Token stays persisted when delivery fails
        try:
            await self.notifier.send_reset_link(email, self.settings.reset_url(reset_token))
        except Exception:
            logger.exception(f"Password reset email delivery failed for account {account_id}")

        return Return.ok(MessageResponse(message=GENERIC_RESET_MESSAGE))

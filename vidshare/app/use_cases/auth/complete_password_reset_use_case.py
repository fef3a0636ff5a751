"""
Complete Password Reset Use Case

Consumes a reset token exactly once and replaces the password.
"""

import logging

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.passwords import hash_password, hash_reset_token, validate_password
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import utcnow
from vidshare.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class CompletePasswordResetUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - New password must satisfy the length policy (WEAK_PASSWORD)
    - Token must match and be unexpired; expired tokens are rejected even
      though the row still holds them
    - Password replacement and token clearing happen in one conditional
      UPDATE, so a token can be consumed at most once
    - Existing session claims stay valid until their own expiry
    """

    def __init__(self, uow: UnitOfWork, settings: AuthSettings):
        self.uow = uow
        self.settings = settings

    async def execute(self, token: str, new_password: str) -> Result[MessageResponse]:
        """
        Execute complete password reset use case.

        Errors:
            - INVALID_INPUT: token or password missing
            - WEAK_PASSWORD: password shorter than the minimum
            - PASSWORD_TOO_LONG: password over the 72-byte bcrypt limit
            - INVALID_OR_EXPIRED_TOKEN: no unexpired token matched
        """
        if not token or not new_password:
            return Return.err(Error("INVALID_INPUT", "Token and new password are required"))

        password_check = validate_password(new_password, self.settings.password_min_length)
        if password_check.is_err():
            return Return.err(password_check.error)

        password_hash = hash_password(new_password, self.settings.bcrypt_rounds)

        async with self.uow:
            consumed = await self.uow.accounts.consume_reset_token(
                hash_reset_token(token), password_hash, utcnow()
            )
            if not consumed:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired reset token")
                )

            await self.uow.commit()

        logger.info("Password reset completed")
        return Return.ok(MessageResponse(message="Password reset successfully"))

from vidshare.app.services.passwords import hash_reset_token
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import utcnow
from vidshare.libs.result import Error, Result, Return
from .dtos import MessageResponse


class VerifyResetTokenUseCase:
    """Check that a reset token matches an account and has not expired"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[MessageResponse]:
        if not token:
            return Return.err(Error("INVALID_INPUT", "Token is required"))

        async with self.uow:
            account = await self.uow.accounts.get_by_reset_token_hash(
                hash_reset_token(token), utcnow()
            )
            if account is None:
                return Return.err(
                    Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired reset token")
                )

            return Return.ok(MessageResponse(message="Token is valid"))

import logging
from uuid import UUID

from vidshare.app.services.passwords import check_password
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.libs.result import Error, Result, Return
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class DeleteAccountUseCase:
    """
    Delete the caller's own account after re-checking the password.

    Owned videos are deleted first, in the same transaction.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, password: str) -> Result[MessageResponse]:
        """
        Errors:
            - INVALID_INPUT: password missing
            - ACCOUNT_NOT_FOUND: claim refers to a deleted account
            - INVALID_PASSWORD: password does not match
        """
        if not password:
            return Return.err(
                Error("INVALID_INPUT", "Password is required to delete account")
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "User not found"))

            if not check_password(password, account.password_hash):
                return Return.err(Error("INVALID_PASSWORD", "Invalid password"))

            videos_deleted = await self.uow.videos.delete_by_owner_id(account.id)
            await self.uow.accounts.delete(account)
            await self.uow.commit()

            logger.info(f"Account {account_id} deleted with {videos_deleted} videos")
            return Return.ok(MessageResponse(message="Account deleted successfully"))

"""
Use Case: Admin Delete User

Removes another user's account together with their videos.
"""

import logging
from uuid import UUID

from pydantic import BaseModel

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import normalize_email
from vidshare.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


class DeleteUserResponse(BaseModel):
    """Response DTO for DeleteUserUseCase"""

    message: str
    videos_deleted: int


class DeleteUserUseCase:
    """
    Business Logic:
    1. Validate target account exists (ACCOUNT_NOT_FOUND)
    2. Refuse to delete the requesting admin's own account (CANNOT_DELETE_SELF)
    3. Delete the target's videos, then the account
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, target_id: UUID, requester_id: UUID, requester_email: str
    ) -> Result[DeleteUserResponse]:
        """
        Execute admin delete user use case.

        Args:
            target_id: Account to delete
            requester_id: Account id from the admin's session claim
            requester_email: Email from the admin's session claim
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_id(target_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "User not found"))

            if account.id == requester_id or account.email == normalize_email(requester_email):
                return Return.err(
                    Error("CANNOT_DELETE_SELF", "Cannot delete your own account")
                )

            videos_deleted = await self.uow.videos.delete_by_owner_id(account.id)
            await self.uow.accounts.delete(account)
            await self.uow.commit()

            logger.info(f"Admin {requester_id} deleted account {target_id}")
            return Return.ok(
                DeleteUserResponse(
                    message="User deleted successfully", videos_deleted=videos_deleted
                )
            )

"""
Use Case: Update Own Profile

Partial update of display name and profile image. Only fields the caller
explicitly sent are written.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import utcnow
from vidshare.libs.result import Error, Result, Return


class UpdateProfileCommand(BaseModel):
    """Fields left unset are not touched"""

    display_name: Optional[str] = Field(default=None, max_length=100)
    profile_image: Optional[str] = Field(default=None, max_length=2048)


class ProfileResponse(BaseModel):
    """Response DTO for UpdateProfileUseCase"""

    message: str
    email: str
    display_name: str
    profile_image: Optional[str] = None


class UpdateProfileUseCase:
    """
    Business Logic:
    1. Load account from the session's account id
    2. Apply only explicitly provided fields
    3. Echo the stored values

    The caller's session claim is NOT refreshed here; clients re-issue it
    through the session endpoint to see the new values in their claim.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, account_id: UUID, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "User not found"))

            provided = command.model_fields_set
            if "display_name" in provided:
                account.display_name = (command.display_name or "").strip()
            if "profile_image" in provided:
                account.profile_image = command.profile_image or None

            if provided:
                account.updated_at = utcnow()
                account = await self.uow.accounts.update(account)
                await self.uow.commit()

            return Return.ok(
                ProfileResponse(
                    message="Profile updated successfully",
                    email=account.email,
                    display_name=account.display_name,
                    profile_image=account.profile_image,
                )
            )

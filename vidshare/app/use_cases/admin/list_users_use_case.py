"""
Use Case: Admin List Users

Moderation listing. Password hashes and reset tokens never leave the store.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.libs.result import Result, Return


class AdminUserView(BaseModel):
    id: str
    email: str
    display_name: str
    profile_image: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ListUsersResponse(BaseModel):
    """Response DTO for ListUsersUseCase"""

    users: List[AdminUserView]


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListUsersResponse]:
        async with self.uow:
            accounts = await self.uow.accounts.list_all()
            return Return.ok(
                ListUsersResponse(
                    users=[
                        AdminUserView(
                            id=str(account.id),
                            email=account.email,
                            display_name=account.display_name,
                            profile_image=account.profile_image,
                            created_at=account.created_at,
                            updated_at=account.updated_at,
                        )
                        for account in accounts
                    ]
                )
            )

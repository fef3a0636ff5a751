from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from vidshare.app.repositories.account_repository import IAccountRepository
from vidshare.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Account]:
        stmt = select(Account).order_by(Account.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self, created_since: Optional[datetime] = None) -> int:
        stmt = select(func.count()).select_from(Account)
        if created_since is not None:
            stmt = stmt.where(Account.created_at >= created_since)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def delete(self, account: Account) -> None:
        await self.session.delete(account)
        await self.session.flush()

    async def get_by_reset_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Account]:
        stmt = select(Account).where(
            Account.reset_token_hash == token_hash,
            Account.reset_token_expires_at > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def consume_reset_token(
        self, token_hash: str, password_hash: str, now: datetime
    ) -> bool:
        """Single conditional UPDATE; the row count decides the winner"""
        stmt = (
            update(Account)
            .where(
                Account.reset_token_hash == token_hash,
                Account.reset_token_expires_at > now,
            )
            .values(
                password_hash=password_hash,
                reset_token_hash=None,
                reset_token_expires_at=None,
                updated_at=now,
            )
            .execution_options(synchronize_session="evaluate")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

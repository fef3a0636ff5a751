from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from vidshare.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by normalized email address"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Account]:
        """List all accounts, newest first"""
        pass

    @abstractmethod
    async def count(self, created_since: Optional[datetime] = None) -> int:
        """Count accounts, optionally only those created since a point in time"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass

    @abstractmethod
    async def delete(self, account: Account) -> None:
        """Delete an account"""
        pass

    @abstractmethod
    async def get_by_reset_token_hash(
        self, token_hash: str, now: datetime
    ) -> Optional[Account]:
        """Get the account holding an unexpired reset token with this hash"""
        pass

    @abstractmethod
    async def consume_reset_token(
        self, token_hash: str, password_hash: str, now: datetime
    ) -> bool:
        """
        Atomically replace the password and clear the reset token.

        Matches only an unexpired token. Returns False when nothing matched,
        so of two concurrent consumers at most one sees True.
        """
        pass

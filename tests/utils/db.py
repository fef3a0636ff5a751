from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from vidshare.domain.entities import Account


async def get_account(db_session: AsyncSession, email: str) -> Optional[Account]:
    """Fresh read; the app shares this session and may have expired cached rows"""
    result = await db_session.exec(
        select(Account).where(Account.email == email).execution_options(populate_existing=True)
    )
    return result.first()

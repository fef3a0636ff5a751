from uuid import UUID

from vidshare.app.services.session_issuer import SessionIssuer
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.libs.result import Error, Result, Return
from .dtos import SessionResponse


class ReissueSessionUseCase:
    """
    Sign a fresh claim from the stored account.

    Claims are immutable for their TTL, so profile edits only show up in the
    session after this explicit re-issue. The new claim gets a new full TTL.
    """

    def __init__(self, uow: UnitOfWork, issuer: SessionIssuer):
        self.uow = uow
        self.issuer = issuer

    async def execute(self, account_id: UUID) -> Result[SessionResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "User not found"))

            token, claim = self.issuer.issue(account)
            return Return.ok(
                SessionResponse(access_token=token, expires_at=claim.expires_at, claim=claim)
            )

import logging

from sqlalchemy.exc import IntegrityError

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.passwords import hash_password, validate_password
from vidshare.app.services.unit_of_work import UnitOfWork
from vidshare.domain.base import normalize_email
from vidshare.domain.entities import Account
from vidshare.libs.result import Error, Result, Return
from .dtos import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Normalize email (trim, lower-case)
    2. Enforce password length policy
    3. Reject duplicate email (EMAIL_ALREADY_EXISTS)
    4. Store bcrypt hash only
    """

    def __init__(self, uow: UnitOfWork, settings: AuthSettings):
        self.uow = uow
        self.settings = settings

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Returns:
            Result[RegisterResponse] with the new account id,
            or Error(INVALID_INPUT | WEAK_PASSWORD | PASSWORD_TOO_LONG | EMAIL_ALREADY_EXISTS)
        """
        email = normalize_email(command.email)
        if not email or not command.password:
            return Return.err(Error("INVALID_INPUT", "Email and password are required"))

        password_check = validate_password(command.password, self.settings.password_min_length)
        if password_check.is_err():
            return Return.err(password_check.error)

        async with self.uow:
            existing = await self.uow.accounts.get_by_email(email)
            if existing:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "User already registered"))

            account = Account(
                email=email,
                password_hash=hash_password(command.password, self.settings.bcrypt_rounds),
            )
            try:
                account = await self.uow.accounts.create(account)
                await self.uow.commit()
            except IntegrityError:
                # Lost a race against a concurrent registration
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "User already registered"))

            logger.info(f"Account registered: {account.id}")
            return Return.ok(
                RegisterResponse(message="User registered successfully", user_id=str(account.id))
            )

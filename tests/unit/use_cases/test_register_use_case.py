"""
Unit tests for RegisterUseCase
"""

import bcrypt
import pytest
from sqlalchemy.exc import IntegrityError

from vidshare.app.use_cases.auth import RegisterCommand, RegisterUseCase
from vidshare.domain.entities import Account


@pytest.mark.asyncio
async def test_register_stores_normalized_email_and_hash(mock_uow, auth_settings):
    use_case = RegisterUseCase(mock_uow, auth_settings)

    result = await use_case.execute(RegisterCommand(email="  Alice@Example.COM ", password="secret1"))

    assert result.is_ok()
    assert result.value.message == "User registered successfully"

    mock_uow.accounts.get_by_email.assert_called_once_with("alice@example.com")
    created = mock_uow.accounts.create.call_args.args[0]
    assert created.email == "alice@example.com"
    assert created.password_hash != "secret1"
    assert bcrypt.checkpw(b"secret1", created.password_hash.encode())
    assert result.value.user_id == str(created.id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_register_duplicate_email(mock_uow, auth_settings):
    mock_uow.accounts.get_by_email.return_value = Account(
        email="alice@example.com", password_hash="x" * 60
    )
    use_case = RegisterUseCase(mock_uow, auth_settings)

    result = await use_case.execute(RegisterCommand(email="ALICE@example.com", password="secret1"))

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.accounts.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("password", ["", "a", "12345"])
async def test_register_short_password(mock_uow, auth_settings, password):
    use_case = RegisterUseCase(mock_uow, auth_settings)

    result = await use_case.execute(RegisterCommand(email="bob@example.com", password=password))

    assert result.is_err()
    assert result.error.code in ("WEAK_PASSWORD", "INVALID_INPUT")
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_register_exactly_min_length_accepted(mock_uow, auth_settings):
    use_case = RegisterUseCase(mock_uow, auth_settings)

    result = await use_case.execute(RegisterCommand(email="bob@example.com", password="123456"))

    assert result.is_ok()


@pytest.mark.asyncio
async def test_register_concurrent_duplicate_maps_to_conflict(mock_uow, auth_settings):
    """Unique index violation from a racing insert is still EMAIL_ALREADY_EXISTS"""
    mock_uow.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
    use_case = RegisterUseCase(mock_uow, auth_settings)

    result = await use_case.execute(RegisterCommand(email="race@example.com", password="secret1"))

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"

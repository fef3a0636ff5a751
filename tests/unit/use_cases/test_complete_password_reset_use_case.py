"""
Unit tests for CompletePasswordResetUseCase and VerifyResetTokenUseCase
"""

import hashlib
from uuid import uuid4

import bcrypt
import pytest

from vidshare.app.use_cases.auth import CompletePasswordResetUseCase, VerifyResetTokenUseCase
from vidshare.domain.entities import Account


@pytest.mark.asyncio
async def test_complete_reset_consumes_token_atomically(mock_uow, auth_settings):
    plain_token = "a" * 64
    token_hash = hashlib.sha256(plain_token.encode()).hexdigest()
    mock_uow.accounts.consume_reset_token.return_value = True

    result = await CompletePasswordResetUseCase(mock_uow, auth_settings).execute(plain_token, "secret2")

    assert result.is_ok()
    assert result.value.message == "Password reset successfully"

    # One conditional update carries the lookup hash and the new bcrypt hash
    mock_uow.accounts.consume_reset_token.assert_called_once()
    called_hash, new_hash, _now = mock_uow.accounts.consume_reset_token.call_args.args
    assert called_hash == token_hash
    assert bcrypt.checkpw(b"secret2", new_hash.encode())
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_complete_reset_invalid_or_expired_token(mock_uow, auth_settings):
    mock_uow.accounts.consume_reset_token.return_value = False

    result = await CompletePasswordResetUseCase(mock_uow, auth_settings).execute("nope", "secret2")

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_complete_reset_weak_password_checked_first(mock_uow, auth_settings):
    result = await CompletePasswordResetUseCase(mock_uow, auth_settings).execute("token", "12345")

    assert result.is_err()
    assert result.error.code == "WEAK_PASSWORD"
    mock_uow.accounts.consume_reset_token.assert_not_called()


@pytest.mark.asyncio
async def test_complete_reset_missing_fields(mock_uow, auth_settings):
    result = await CompletePasswordResetUseCase(mock_uow, auth_settings).execute("", "secret2")

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_verify_token_valid(mock_uow):
    mock_uow.accounts.get_by_reset_token_hash.return_value = Account(
        id=uuid4(), email="alice@example.com", password_hash="x" * 60
    )

    result = await VerifyResetTokenUseCase(mock_uow).execute("b" * 64)

    assert result.is_ok()
    assert result.value.message == "Token is valid"
    token_hash, _now = mock_uow.accounts.get_by_reset_token_hash.call_args.args
    assert token_hash == hashlib.sha256(("b" * 64).encode()).hexdigest()


@pytest.mark.asyncio
async def test_verify_token_unknown_or_expired(mock_uow):
    mock_uow.accounts.get_by_reset_token_hash.return_value = None

    result = await VerifyResetTokenUseCase(mock_uow).execute("b" * 64)

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"


@pytest.mark.asyncio
async def test_verify_token_missing(mock_uow):
    result = await VerifyResetTokenUseCase(mock_uow).execute("")

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"
    mock_uow.accounts.get_by_reset_token_hash.assert_not_called()

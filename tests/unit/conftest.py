from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.session_issuer import SessionIssuer


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_by_reset_token_hash = AsyncMock(return_value=None)
    uow.accounts.consume_reset_token = AsyncMock(return_value=False)
    uow.accounts.list_all = AsyncMock(return_value=[])
    uow.accounts.count = AsyncMock(return_value=0)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)
    uow.accounts.delete = AsyncMock()

    uow.videos = MagicMock()
    uow.videos.get_by_id = AsyncMock(return_value=None)
    uow.videos.list_all = AsyncMock(return_value=[])
    uow.videos.count = AsyncMock(return_value=0)
    uow.videos.create = AsyncMock(side_effect=lambda video: video)
    uow.videos.delete = AsyncMock()
    uow.videos.delete_by_owner_id = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def auth_settings():
    # Minimum bcrypt cost keeps the suite fast
    return AuthSettings(
        signing_secret="unit-test-secret",
        admin_emails=frozenset({"admin@example.com"}),
        bcrypt_rounds=4,
        reset_token_ttl=timedelta(minutes=10),
        frontend_url="https://vidshare.test",
    )


@pytest.fixture
def issuer(auth_settings):
    return SessionIssuer(auth_settings)

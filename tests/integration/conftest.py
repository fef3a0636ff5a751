from typing import List, Tuple

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from tests.fixtures.json_loader import TestDataLoader
from vidshare.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from vidshare.app.services.password_reset_notifier import IPasswordResetNotifier
from vidshare.depends import get_password_reset_notifier, get_unit_of_work
from vidshare.domain import entities  # noqa: F401  registers tables on SQLModel.metadata


class TestConfig(ApplicationConfig):
    SESSION_SECRET = "test-session-secret"
    ADMIN_EMAILS = ["admin@example.com"]
    BCRYPT_ROUNDS = 4
    FRONTEND_URL = "https://vidshare.test"
    CORS_ORIGINS = []
    SMTP_HOST = ""
    MEDIA_PUBLIC_KEY = "public_test_key"
    MEDIA_PRIVATE_KEY = "private_test_key"
    MEDIA_URL_ENDPOINT = "https://media.example.com/vidshare"
    MEDIA_UPLOAD_TOKEN_TTL_SECONDS = 1800


class RecordingNotifier(IPasswordResetNotifier):
    """Keeps sent reset links in memory; set fail=True to simulate an SMTP outage"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []
        self.fail = False

    async def send_reset_link(self, email: str, reset_url: str) -> None:
        if self.fail:
            raise ConnectionError("SMTP unavailable")
        self.sent.append((email, reset_url))


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from vidshare.api.app import create_app

    app = create_app(TestConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_reset_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

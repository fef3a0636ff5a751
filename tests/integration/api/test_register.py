import pytest
from httpx import AsyncClient

from tests.utils.db import get_account


@pytest.mark.asyncio
async def test_register_success(client: AsyncClient, db_session):
    """Register stores a normalized email and a bcrypt hash, never the password"""
    response = await client.post("/auth/register", json={
        "email": "Alice@Example.COM",
        "password": "secret1",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User registered successfully"
    assert data["user_id"]

    account = await get_account(db_session, "alice@example.com")
    assert account is not None
    assert str(account.id) == data["user_id"]
    assert account.password_hash != "secret1"
    assert account.password_hash.startswith("$2")


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient):
    """Second registration with the same normalized email is a conflict"""
    first = await client.post("/auth/register", json={"email": "alice@example.com", "password": "secret1"})
    assert first.status_code == 201

    response = await client.post("/auth/register", json={"email": "ALICE@example.com", "password": "other-secret"})

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_register_short_password(client: AsyncClient, db_session):
    response = await client.post("/auth/register", json={"email": "alice@example.com", "password": "12345"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "WEAK_PASSWORD"
    assert await get_account(db_session, "alice@example.com") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"email": "not-an-email", "password": "secret1"},
    {"email": "alice@example.com"},
    {"password": "secret1"},
])
async def test_register_invalid_input(client: AsyncClient, payload):
    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_register_password_over_bcrypt_limit(client: AsyncClient, db_session):
    """Over 72 bytes is refused with its own code instead of being truncated"""
    response = await client.post("/auth/register", json={"email": "alice@example.com", "password": "x" * 73})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "PASSWORD_TOO_LONG"
    assert await get_account(db_session, "alice@example.com") is None

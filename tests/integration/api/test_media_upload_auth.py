import hashlib
import hmac
import time

import pytest
from httpx import AsyncClient

from tests.utils.session import bearer, register_and_login


@pytest.mark.asyncio
async def test_upload_auth_params(client: AsyncClient, test_data):
    alice = test_data.user("alice")
    token = await register_and_login(client, alice["email"], alice["password"])

    response = await client.get("/media/upload-auth", headers=bearer(token))

    assert response.status_code == 200
    params = response.json()
    assert params["public_key"] == "public_test_key"
    assert params["url_endpoint"] == "https://media.example.com/vidshare"
    assert 0 < params["expire"] - time.time() <= 1800
    expected = hmac.new(
        b"private_test_key", f"{params['token']}{params['expire']}".encode(), hashlib.sha1
    ).hexdigest()
    assert params["signature"] == expected


@pytest.mark.asyncio
async def test_upload_auth_requires_session(client: AsyncClient):
    response = await client.get("/media/upload-auth")

    assert response.status_code == 401

import pytest
from httpx import AsyncClient

from tests.utils.session import bearer, register_and_login


@pytest.mark.asyncio
async def test_health_is_public(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_protected_api_request_gets_401(client: AsyncClient):
    response = await client.get("/videos")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"
    assert response.headers["location"] == "/login?callbackUrl=%2Fvideos"


@pytest.mark.asyncio
async def test_protected_page_redirects_to_login(client: AsyncClient):
    response = await client.get("/admin/stats", headers={"Accept": "text/html,application/xhtml+xml"})

    assert response.status_code == 307
    assert response.headers["location"] == "/login?callbackUrl=%2Fadmin%2Fstats"


@pytest.mark.asyncio
async def test_forged_token_redirects_like_missing_token(client: AsyncClient):
    response = await client.get("/me", headers={"Accept": "text/html", **bearer("forged.token.value")})

    assert response.status_code == 307
    assert response.headers["location"] == "/login?callbackUrl=%2Fme"


@pytest.mark.asyncio
async def test_public_page_not_gated(client: AsyncClient):
    # No page is served here, but the gate must let it through to routing
    response = await client.get("/login", headers={"Accept": "text/html"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_valid_session_passes_gate(client: AsyncClient, test_data):
    alice = test_data.user("alice")
    token = await register_and_login(client, alice["email"], alice["password"])

    response = await client.get("/videos", headers=bearer(token))

    assert response.status_code == 200
    assert response.json() == {"videos": []}

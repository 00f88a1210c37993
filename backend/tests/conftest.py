"""
Pytest configuration and shared fixtures for the Melody Magic tests.

PayPal is never contacted: FakePayPal answers the token and order endpoints
through httpx.MockTransport, and the app's HTTP client / PayPal config
dependencies are overridden to point at it.
"""
import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import json
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import PayPalConfig

TEST_BASE_URL = "https://paypal.test"
TEST_CLIENT_ID = "test-client-id"
TEST_SECRET = "test-secret"
TEST_TOKEN = "A21AAtest-access-token"

COMPLETED_ORDER = {
    "id": "ORDER123",
    "status": "COMPLETED",
    "purchase_units": [{"amount": {"value": "3.00", "currency_code": "USD"}}],
}


class FakePayPal:
    """
    Minimal stand-in for the PayPal REST API.

    Tweak the attributes in a test to shape the responses; every request
    that reaches the fake is kept in ``requests``.
    """

    def __init__(self):
        self.token_status = 200
        self.token_body: dict = {"access_token": TEST_TOKEN, "expires_in": 32400}
        self.orders: dict[str, dict] = {"ORDER123": dict(COMPLETED_ORDER)}
        self.order_status: int | None = None  # force a status for every order fetch
        self.fail_with: Exception | None = None  # raised for every request
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with

        path = request.url.path
        if request.method == "POST" and path == "/v1/oauth2/token":
            return httpx.Response(self.token_status, json=self.token_body)

        prefix = "/v2/checkout/orders/"
        if request.method == "GET" and path.startswith(prefix):
            if request.headers.get("authorization") != f"Bearer {TEST_TOKEN}":
                return httpx.Response(401, json={"error": "invalid_token"})
            order_id = path[len(prefix):]
            if self.order_status is not None:
                return httpx.Response(self.order_status, json={"name": "FORCED"})
            if order_id not in self.orders:
                return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})
            return httpx.Response(200, content=json.dumps(self.orders[order_id]))

        return httpx.Response(404)

    @property
    def order_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]


# ── PayPal Fixtures ──────────────────────────────────────────────────


@pytest.fixture
def paypal_config() -> PayPalConfig:
    return PayPalConfig(
        base_url=TEST_BASE_URL,
        client_id=TEST_CLIENT_ID,
        client_secret=TEST_SECRET,
        timeout_seconds=5.0,
    )


@pytest.fixture
def fake_paypal() -> FakePayPal:
    return FakePayPal()


@pytest_asyncio.fixture
async def paypal_http(fake_paypal: FakePayPal) -> AsyncGenerator[httpx.AsyncClient, None]:
    """httpx client wired to FakePayPal, for service-level tests."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_paypal.handler)) as c:
        yield c


# ── App Fixtures ─────────────────────────────────────────────────────


@pytest_asyncio.fixture
async def client(fake_paypal: FakePayPal, paypal_config: PayPalConfig) -> AsyncGenerator[AsyncClient, None]:
    """ASGI client for the app, with PayPal swapped for FakePayPal."""
    from main import app
    from deps import get_http_client, get_paypal_config

    async def override_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_paypal.handler)) as c:
            yield c

    app.dependency_overrides[get_http_client] = override_http_client
    app.dependency_overrides[get_paypal_config] = lambda: paypal_config

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()

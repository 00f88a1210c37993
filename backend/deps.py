"""
Shared FastAPI dependencies.

Routers get the PayPal config and the outbound HTTP client from here, so
tests can swap both through ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import AsyncGenerator

import httpx

from config import PayPalConfig, settings


def get_paypal_config() -> PayPalConfig:
    return settings.paypal_config()


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """One AsyncClient per request; closed when the response is done."""
    async with httpx.AsyncClient(timeout=settings.paypal_timeout_seconds) as client:
        yield client

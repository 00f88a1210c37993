"""
PayPal Service — verifies that an order was paid before generation runs.

Two steps, both against the PayPal REST API:
    1. Client-credentials exchange for a bearer token (fresh every time,
       nothing is cached between requests)
    2. Order lookup + business rules (status, amount, currency)

Both functions take the PayPalConfig and the httpx.AsyncClient explicitly,
so the route decides which client/config they run against.
"""
import logging
from typing import Optional, Tuple
from urllib.parse import quote

import httpx

from config import PayPalConfig
from domain.constants import (
    REQUIRED_AMOUNT_VALUE,
    REQUIRED_CURRENCY_CODE,
    REQUIRED_ORDER_STATUS,
)
from domain.errors import (
    AmountMismatchError,
    OrderNotFoundError,
    PaymentIncompleteError,
    UpstreamAuthError,
    UpstreamUnreachableError,
)

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"
ORDER_PATH = "/v2/checkout/orders/{order_id}"


# ════════════════════════════════════════════════════════════════════
# Token Acquirer
# ════════════════════════════════════════════════════════════════════


async def get_access_token(client: httpx.AsyncClient, config: PayPalConfig) -> str:
    """
    Exchange the service credentials for a PayPal access token.

    Credentials are not checked locally; empty ones just fail upstream.

    Raises:
        UpstreamUnreachableError: the request never completed
        UpstreamAuthError: PayPal answered with a non-2xx status or no token
    """
    try:
        response = await client.post(
            f"{config.base_url}{TOKEN_PATH}",
            auth=(config.client_id, config.client_secret),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data={"grant_type": "client_credentials"},
            timeout=config.timeout_seconds,
        )
    except httpx.RequestError as e:
        logger.error(f"PayPal token endpoint unreachable: {e!r}")
        raise UpstreamUnreachableError(details={"step": "token"}) from e

    if not response.is_success:
        logger.error(f"PayPal token exchange failed: HTTP {response.status_code}")
        raise UpstreamAuthError(details={"status_code": response.status_code})

    try:
        body = response.json()
    except ValueError:
        body = None
    token = body.get("access_token") if isinstance(body, dict) else None
    if not token:
        logger.error("PayPal token response carried no access_token")
        raise UpstreamAuthError(details={"status_code": response.status_code})

    return token


# ════════════════════════════════════════════════════════════════════
# Order Verifier
# ════════════════════════════════════════════════════════════════════


def _first_amount(order: dict) -> Tuple[Optional[str], Optional[str]]:
    """Pull (value, currency_code) from the first purchase unit, tolerating gaps."""
    units = order.get("purchase_units")
    if not isinstance(units, list) or not units or not isinstance(units[0], dict):
        return None, None
    amount = units[0].get("amount")
    if not isinstance(amount, dict):
        return None, None
    return amount.get("value"), amount.get("currency_code")


def check_order(order: dict) -> bool:
    """
    Apply the payment rules to an order record. First failing rule wins.

    Raises:
        PaymentIncompleteError: status is not COMPLETED
        AmountMismatchError: first purchase unit is not 3.00 USD (or missing)
    """
    if order.get("status") != REQUIRED_ORDER_STATUS:
        raise PaymentIncompleteError(details={"status": order.get("status")})

    value, currency = _first_amount(order)
    if value != REQUIRED_AMOUNT_VALUE or currency != REQUIRED_CURRENCY_CODE:
        raise AmountMismatchError(details={"value": value, "currency_code": currency})

    return True


async def verify_order(order_id: str, client: httpx.AsyncClient, config: PayPalConfig) -> bool:
    """
    Verify that a PayPal order is completed and paid at the expected price.

    Args:
        order_id: PayPal order id supplied by the frontend
        client: HTTP client used for both PayPal calls
        config: PayPal base URL + credentials

    Returns:
        True when every rule passes; every other outcome raises a
        PaymentVerificationError subclass.
    """
    token = await get_access_token(client, config)

    try:
        response = await client.get(
            f"{config.base_url}{ORDER_PATH.format(order_id=quote(order_id, safe=''))}",
            headers={"Authorization": f"Bearer {token}"},
            timeout=config.timeout_seconds,
        )
    except httpx.RequestError as e:
        logger.error(f"PayPal order endpoint unreachable for {order_id}: {e!r}")
        raise UpstreamUnreachableError(details={"step": "order"}) from e

    if not response.is_success:
        raise OrderNotFoundError(details={"status_code": response.status_code})

    try:
        order = response.json()
    except ValueError as e:
        raise OrderNotFoundError(details={"reason": "unreadable order body"}) from e
    if not isinstance(order, dict):
        raise OrderNotFoundError(details={"reason": "unexpected order body"})

    check_order(order)
    logger.info(f"  💳 PayPal order verified: {order_id}")
    return True

"""
Suno generation route — gated behind a verified PayPal order.

Endpoint:
    POST /api/suno/generate   — {orderId, prompt} → mock generation result

Flow per request (nothing survives the request):
    missing orderId  → 403 Payment required
    missing prompt   → 400 Prompt required
    verification     → 403 Payment verification failed on any error
    verified         → 200 mock result

A verified order is not marked as used, so the same orderId keeps working.
"""
import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Body, Depends

from config import PayPalConfig
from deps import get_http_client, get_paypal_config
from domain.errors import (
    PaymentRequiredError,
    PaymentVerificationError,
    PaymentVerificationFailedError,
    PromptRequiredError,
)
from models import ErrorResponse, GenerateRequest, GenerateResponse
from services import generation_service, paypal_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/suno", tags=["generate"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
    },
)
async def generate(
    req: Optional[GenerateRequest] = Body(default=None),
    client: httpx.AsyncClient = Depends(get_http_client),
    paypal: PayPalConfig = Depends(get_paypal_config),
):
    """Verify the PayPal order, then return the mock generation result."""
    req = req or GenerateRequest()

    if not req.order_id:
        raise PaymentRequiredError()

    if not req.prompt:
        raise PromptRequiredError()

    try:
        await paypal_service.verify_order(req.order_id, client, paypal)
    except PaymentVerificationError as e:
        logger.warning(
            f"Payment verification failed for order {req.order_id} "
            f"[{e.code}]: {e.message} {e.details or ''}".rstrip()
        )
        raise PaymentVerificationFailedError(e.message) from e

    result = generation_service.build_mock_result()
    logger.info(f"Generation task {result['taskId']} issued for order {req.order_id}")
    return result

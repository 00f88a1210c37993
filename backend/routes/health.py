"""
Liveness and health endpoints.
"""
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from domain.constants import HEALTH_MESSAGE, LIVENESS_TEXT
from models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def liveness():
    return LIVENESS_TEXT


@router.get("/api/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health_check():
    """Health check — the process is up. PayPal reachability is not probed."""
    return {"ok": True, "message": HEALTH_MESSAGE}

"""
Pydantic models for request/response validation.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class GenerateRequest(BaseModel):
    """Body of POST /api/suno/generate. Both fields optional so the route decides the status."""
    order_id: Optional[str] = Field(default=None, alias="orderId")
    prompt: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class GeneratedVersion(BaseModel):
    version: int
    audio_url: str = Field(..., alias="audioUrl")

    model_config = ConfigDict(populate_by_name=True)


class GenerateResponse(BaseModel):
    """Mock generation result."""
    task_id: str = Field(..., alias="taskId")
    status: str = "complete"
    versions_included: int = Field(..., alias="versionsIncluded")
    versions: List[GeneratedVersion]

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    ok: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Shape of every 4xx/5xx body."""
    error: str
    message: Optional[str] = None

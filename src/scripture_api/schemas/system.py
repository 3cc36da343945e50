"""System API schemas."""

from typing import Any, Dict
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="API status")
    version: str = Field(..., description="API version")
    credential_configured: bool = Field(..., description="Whether GEMINI_API_KEY is set")
    models: Dict[str, Dict[str, Any]] = Field(..., description="Configured model routing")

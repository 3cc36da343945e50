"""System endpoints: health checks and model routing."""

from fastapi import APIRouter, Depends

from ..models.model_gateway import GeminiGateway, get_model_gateway
from ..schemas.system import HealthResponse

router = APIRouter(prefix="", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check(gateway: GeminiGateway = Depends(get_model_gateway)):
    """Check API status and the models each operation routes to."""
    return HealthResponse(
        status="healthy",
        version="1.0.0",
        credential_configured=gateway.is_configured,
        models=gateway.get_configured_models(),
    )

"""Image generation endpoint."""

from typing import Optional
from fastapi import APIRouter, Depends

from ..api.dependencies import get_auth_context
from ..auth import AuthContext
from ..models.model_gateway import GeminiGateway, get_model_gateway
from ..schemas.common import CALLABLE_ERROR_RESPONSES, CallableRequest, CallableResponse
from ..workflows.operations import IMAGE
from ..workflows.pipeline import run_operation

router = APIRouter(prefix="", tags=["Media"], responses=CALLABLE_ERROR_RESPONSES)


@router.post("/generateImage", response_model=CallableResponse, summary="Generate Image")
async def generate_image(
    body: CallableRequest,
    auth: Optional[AuthContext] = Depends(get_auth_context),
    gateway: GeminiGateway = Depends(get_model_gateway),
):
    """
    Generate an image from a prompt.

    `image` holds base64 data, or an empty string when the model answered
    without an image. `modelType: "4k"` selects the high-definition model.
    """
    return CallableResponse(result=await run_operation(IMAGE, body.data, auth, gateway))

"""Image generation schemas."""

from typing import Literal, Optional
from pydantic import Field

from .common import OperationInput


AspectRatio = Literal["1:1", "2:3", "3:2", "3:4", "4:3", "4:5", "5:4", "9:16", "16:9", "21:9"]

HD_MODEL_TYPE = "4k"


class ImageRequest(OperationInput):
    prompt: str = Field(..., min_length=1)
    aspect_ratio: Optional[AspectRatio] = Field(None, alias="aspectRatio")
    model_type: Optional[str] = Field(None, alias="modelType", description="'4k' selects the high-definition model")

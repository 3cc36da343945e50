"""Shared schema types for callable operations."""

from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt


LanguageCode = Literal["pt", "en", "es"]

# Nullable, optional number (reader age, loose chapter references)
OptionalNumber = Optional[Union[StrictInt, StrictFloat]]


class OperationInput(BaseModel):
    """Base class for operation inputs; unknown keys are ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LanguageInput(OperationInput):
    """Input carrying the display language of the generated content."""
    lang: LanguageCode = Field("pt", description="Response language code")


class CallableRequest(BaseModel):
    """Wire format of an inbound call: ``{"data": ...}``."""
    data: Any = Field(None, description="Operation payload; validated per operation")


class CallableResponse(BaseModel):
    """Wire format of a successful call: ``{"result": envelope}``."""
    result: Dict[str, Any] = Field(..., description="Result envelope, always with success=true")


class CallableErrorDetail(BaseModel):
    status: str = Field(..., description="Error kind, e.g. INVALID_ARGUMENT")
    message: str = Field(..., description="Human-readable message")


class CallableErrorResponse(BaseModel):
    """Wire format of a failed call: ``{"error": {...}}``."""
    error: CallableErrorDetail


CALLABLE_ERROR_RESPONSES = {
    400: {"description": "INVALID_ARGUMENT or FAILED_PRECONDITION", "model": CallableErrorResponse},
    401: {"description": "UNAUTHENTICATED", "model": CallableErrorResponse},
    500: {"description": "INTERNAL", "model": CallableErrorResponse},
}

"""Generic request pipeline shared by every model-backed operation.

auth check -> schema validation -> prompt -> retried model call ->
(JSON extraction) -> success envelope. Any failure short-circuits into a
single CallableError; no partial payload is ever returned.
"""

import base64
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Optional, Type

from pydantic import BaseModel

from ..auth import AuthContext, check_auth
from ..config import Settings, get_settings
from ..errors import CallableError, ErrorCode, StructuredOutputError
from ..models.model_gateway import PERMISSIVE_SAFETY_SETTINGS, GeminiGateway, ModelResponse
from ..utils.helpers import DEFAULT_LANGUAGE, get_language_name, spread_payload
from ..utils.json_extraction import JsonExtractor, extract_json
from ..utils.retry import retry_with_backoff
from ..utils.validation import validate_payload


logger = logging.getLogger("scripture_api.pipeline")


class OutputMode(str, Enum):
    """What the model is expected to produce."""
    TEXT = "text"
    JSON_OBJECT = "json_object"
    JSON_ARRAY = "json_array"
    IMAGE = "image"


def use_text_model(request: BaseModel, settings: Settings) -> str:
    return settings.text_model


@dataclass(frozen=True)
class OperationSpec:
    """Everything that distinguishes one callable operation from another."""
    name: str
    schema: Type[BaseModel]
    build_prompt: Callable[[Any, str], str]
    output_mode: OutputMode = OutputMode.TEXT
    # Named in the extraction-failure message, e.g. "storyboard"
    payload_kind: str = ""
    # Envelope field holding a JSON array payload
    result_key: Optional[str] = None
    language_field: str = "lang"
    select_model: Callable[[Any, Settings], str] = use_text_model
    safety_settings: Optional[Dict[Any, Any]] = field(default_factory=lambda: dict(PERMISSIVE_SAFETY_SETTINGS))
    shape_result: Optional[Callable[[Any, Any], Dict[str, Any]]] = None
    translate_error: Optional[Callable[[Exception], Optional[CallableError]]] = None


def encode_inline_image(response: ModelResponse) -> str:
    """
    Base64 of the first inline-data part, or ``""`` when there is none.

    An empty string is a successful result: the model may answer an image
    request with text only.
    """
    part = response.first_inline_part()
    if part is None:
        return ""
    data = part.inline_data
    if isinstance(data, str):
        return data
    return base64.b64encode(data).decode("ascii")


def extract_payload(spec: OperationSpec, text: str, extractor: JsonExtractor = extract_json) -> Any:
    """
    Turn model text into the operation payload.

    Raises:
        StructuredOutputError: no JSON of the expected shape was found
    """
    if spec.output_mode is OutputMode.TEXT:
        return text

    payload = extractor(text)
    expected = dict if spec.output_mode is OutputMode.JSON_OBJECT else list
    if not isinstance(payload, expected):
        raise StructuredOutputError(f"Failed to generate valid JSON for {spec.payload_kind or spec.name}")
    return payload


def build_envelope(spec: OperationSpec, request: BaseModel, payload: Any) -> Dict[str, Any]:
    if spec.shape_result is not None:
        return spec.shape_result(request, payload)
    if spec.output_mode is OutputMode.JSON_OBJECT:
        return spread_payload(payload)
    if spec.output_mode is OutputMode.JSON_ARRAY:
        return {"success": True, spec.result_key or "results": payload}
    if spec.output_mode is OutputMode.IMAGE:
        return {"success": True, "image": payload}
    return {"success": True, "text": payload}


async def run_operation(
    spec: OperationSpec,
    data: Any,
    auth: Optional[AuthContext],
    gateway: GeminiGateway,
    extractor: JsonExtractor = extract_json,
    settings: Optional[Settings] = None,
    sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
) -> Dict[str, Any]:
    """
    Execute one callable operation end to end.

    Args:
        spec: Operation definition
        data: Untyped client payload
        auth: Caller identity, None when anonymous
        gateway: Model gateway
        extractor: JSON extraction strategy for structured operations
        settings: Overrides the global settings (retry budget, model ids)
        sleep: Overrides the backoff sleep

    Returns:
        Success envelope for the operation

    Raises:
        CallableError: UNAUTHENTICATED, INVALID_ARGUMENT, FAILED_PRECONDITION or INTERNAL
    """
    check_auth(auth)
    request = validate_payload(spec.schema, data)
    settings = settings or get_settings()

    language = get_language_name(getattr(request, spec.language_field, DEFAULT_LANGUAGE))
    prompt = spec.build_prompt(request, language)
    model_name = spec.select_model(request, settings)

    try:
        if spec.output_mode is OutputMode.IMAGE:
            response = await retry_with_backoff(
                lambda: gateway.generate_image(prompt, model_name, aspect_ratio=getattr(request, "aspect_ratio", None)),
                retries=settings.retry_attempts,
                delay_ms=settings.retry_initial_delay_ms,
                sleep=sleep,
            )
            response.raise_for_block()
            payload = encode_inline_image(response)
        else:
            async def attempt() -> str:
                response = await gateway.generate_text(prompt, model_name, safety_settings=spec.safety_settings)
                return response.require_text()

            text = await retry_with_backoff(
                attempt,
                retries=settings.retry_attempts,
                delay_ms=settings.retry_initial_delay_ms,
                sleep=sleep,
            )
            # Outside the retried call: malformed output is never retried.
            payload = extract_payload(spec, text, extractor)

        return build_envelope(spec, request, payload)
    except CallableError:
        raise
    except Exception as e:
        logger.error("Error in %s: %s", spec.name, e)
        if spec.translate_error is not None:
            translated = spec.translate_error(e)
            if translated is not None:
                raise translated from None
        raise CallableError(ErrorCode.INTERNAL, str(e)) from None

"""Gemini model gateway: the only place prompts leave the process."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types
from langchain_google_genai import ChatGoogleGenerativeAI, HarmBlockThreshold, HarmCategory

from ..config import Settings, get_settings
from ..errors import (
    CallableError,
    CandidateBlockedError,
    EmptyGenerationError,
    ErrorCode,
    PromptBlockedError,
)


logger = logging.getLogger("scripture_api.gateway")


# Least restrictive threshold, sent explicitly with every text request.
PERMISSIVE_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_NONE,
}

BLOCKING_FINISH_REASONS = {"SAFETY", "RECITATION", "PROHIBITED_CONTENT", "BLOCKLIST", "SPII"}
_UNSET_BLOCK_REASONS = {"", "0", "NONE", "BLOCK_REASON_UNSPECIFIED"}

IMAGE_RESPONSE_MODALITIES = ["IMAGE", "TEXT"]


@dataclass
class ResponsePart:
    """One part of a multi-part provider response."""
    text: Optional[str] = None
    inline_data: Optional[bytes] = None
    mime_type: Optional[str] = None


@dataclass
class ModelResponse:
    """Raw provider answer: text, inline parts, and any block metadata."""
    text: str = ""
    block_reason: Optional[str] = None
    finish_reason: Optional[str] = None
    parts: List[ResponsePart] = field(default_factory=list)

    def raise_for_block(self) -> None:
        """
        Raise if the provider refused the prompt or stopped generation for a policy reason.

        Raises:
            PromptBlockedError: prompt feedback carries a block reason
            CandidateBlockedError: generation stopped for a policy reason
        """
        if self.block_reason:
            logger.warning("Prompt blocked: %s", self.block_reason)
            raise PromptBlockedError(self.block_reason)
        if self.finish_reason in BLOCKING_FINISH_REASONS:
            raise CandidateBlockedError(self.finish_reason)

    def require_text(self) -> str:
        """
        Return the generated text, or raise if the provider blocked or returned nothing.

        Raises:
            PromptBlockedError: prompt feedback carries a block reason
            CandidateBlockedError: generation stopped for a policy reason
            EmptyGenerationError: no text was produced
        """
        self.raise_for_block()
        if not self.text or not self.text.strip():
            raise EmptyGenerationError()
        return self.text

    def first_inline_part(self) -> Optional[ResponsePart]:
        """Return the first part carrying inline binary data, if any."""
        for part in self.parts:
            if part.inline_data:
                return part
        return None


def _enum_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    name = getattr(value, "name", None)
    return str(name if name is not None else value)


def _block_reason(metadata: Dict[str, Any]) -> Optional[str]:
    feedback = metadata.get("prompt_feedback") or {}
    if isinstance(feedback, dict):
        reason = feedback.get("block_reason")
    else:
        reason = getattr(feedback, "block_reason", None)
    reason = _enum_name(reason)
    if reason is None or reason.upper() in _UNSET_BLOCK_REASONS:
        return None
    return reason


def _message_text(message: Any) -> str:
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks = []
        for block in content:
            if isinstance(block, str):
                chunks.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                chunks.append(block.get("text") or "")
        return "".join(chunks)
    return str(content or "")


class GeminiGateway:
    """Lazily-initialized, process-wide handle to the Gemini provider.

    Provider clients are created on first use, once, and never torn down. A
    missing credential is reported then (FAILED_PRECONDITION), not at startup.
    Text goes through langchain's ``ChatGoogleGenerativeAI``; image generation
    needs the raw multi-part response and goes through the ``google-genai``
    client.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._lock = threading.Lock()
        self._chat_models: Dict[str, ChatGoogleGenerativeAI] = {}
        self._image_client: Optional[genai.Client] = None

    def _require_api_key(self) -> str:
        api_key = self.settings.gemini_api_key
        if not api_key:
            logger.error("GEMINI_API_KEY is not configured on the server")
            raise CallableError(ErrorCode.FAILED_PRECONDITION, "API configuration missing on the server")
        return api_key

    def get_chat_model(self, model_name: str) -> ChatGoogleGenerativeAI:
        """
        Get the chat model for a model identifier, creating it on first use.

        Args:
            model_name: Provider model identifier

        Returns:
            Cached ChatGoogleGenerativeAI instance

        Raises:
            CallableError: FAILED_PRECONDITION if the credential is missing
        """
        model = self._chat_models.get(model_name)
        if model is not None:
            return model

        with self._lock:
            if model_name not in self._chat_models:
                api_key = self._require_api_key()
                extra: Dict[str, Any] = {}
                if self.settings.model_temperature is not None:
                    extra["temperature"] = self.settings.model_temperature
                # Quota retries belong to the caller's backoff loop, not the SDK.
                self._chat_models[model_name] = ChatGoogleGenerativeAI(
                    google_api_key=api_key,
                    model=model_name,
                    max_retries=1,
                    **extra,
                )
            return self._chat_models[model_name]

    def get_image_client(self) -> genai.Client:
        """Get the google-genai client used for image generation, creating it on first use."""
        if self._image_client is not None:
            return self._image_client

        with self._lock:
            if self._image_client is None:
                self._image_client = genai.Client(api_key=self._require_api_key())
            return self._image_client

    async def generate_text(
        self,
        prompt: str,
        model_name: str,
        safety_settings: Optional[Dict[HarmCategory, HarmBlockThreshold]] = None,
    ) -> ModelResponse:
        """
        Send a prompt and return the generated text with its block metadata.

        Args:
            prompt: Instruction string
            model_name: Provider model identifier
            safety_settings: Per-request harm thresholds

        Returns:
            ModelResponse; callers decide whether blocks or emptiness are fatal
        """
        model = self.get_chat_model(model_name)
        kwargs: Dict[str, Any] = {}
        if safety_settings:
            kwargs["safety_settings"] = safety_settings

        message = await model.ainvoke(prompt, **kwargs)
        metadata = getattr(message, "response_metadata", None) or {}
        return ModelResponse(
            text=_message_text(message),
            block_reason=_block_reason(metadata),
            finish_reason=_enum_name(metadata.get("finish_reason")),
        )

    async def generate_image(
        self,
        prompt: str,
        model_name: str,
        aspect_ratio: Optional[str] = None,
    ) -> ModelResponse:
        """
        Ask an image model for a picture and return every response part.

        Args:
            prompt: Image description
            model_name: Provider image model identifier
            aspect_ratio: Optional ratio such as ``16:9``

        Returns:
            ModelResponse whose ``parts`` hold text and inline image data
        """
        client = self.get_image_client()
        config_kwargs: Dict[str, Any] = {"response_modalities": IMAGE_RESPONSE_MODALITIES}
        if aspect_ratio:
            config_kwargs["image_config"] = types.ImageConfig(aspect_ratio=aspect_ratio)

        response = await client.aio.models.generate_content(
            model=model_name,
            contents=prompt,
            config=types.GenerateContentConfig(**config_kwargs),
        )

        parts: List[ResponsePart] = []
        candidates = getattr(response, "candidates", None) or []
        finish_reason = None
        if candidates:
            finish_reason = _enum_name(getattr(candidates[0], "finish_reason", None))
            content = getattr(candidates[0], "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                parts.append(
                    ResponsePart(
                        text=getattr(part, "text", None),
                        inline_data=getattr(inline, "data", None) if inline else None,
                        mime_type=getattr(inline, "mime_type", None) if inline else None,
                    )
                )

        feedback = getattr(response, "prompt_feedback", None)
        return ModelResponse(
            text="".join(p.text for p in parts if p.text),
            block_reason=_block_reason({"prompt_feedback": feedback}) if feedback else None,
            finish_reason=finish_reason,
            parts=parts,
        )

    def get_configured_models(self) -> Dict[str, Dict[str, Any]]:
        """Describe the models this deployment routes to."""
        return {
            "content": {"model": self.settings.content_model, "capabilities": ["text"], "safety": "BLOCK_NONE"},
            "text": {"model": self.settings.text_model, "capabilities": ["text", "json"], "safety": "BLOCK_NONE"},
            "image": {"model": self.settings.image_model, "capabilities": ["image"]},
            "image_hd": {"model": self.settings.image_model_hd, "capabilities": ["image"]},
        }

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.gemini_api_key)


# Global gateway instance
model_gateway = GeminiGateway()


def get_model_gateway() -> GeminiGateway:
    """Get the global model gateway instance."""
    return model_gateway

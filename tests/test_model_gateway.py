"""Tests for the Gemini model gateway."""

import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

from langchain_core.messages import AIMessage

from src.scripture_api.config import Settings
from src.scripture_api.errors import (
    CallableError,
    CandidateBlockedError,
    EmptyGenerationError,
    ErrorCode,
    PromptBlockedError,
)
from src.scripture_api.models.model_gateway import (
    PERMISSIVE_SAFETY_SETTINGS,
    GeminiGateway,
    ModelResponse,
    ResponsePart,
)


@pytest.fixture
def gateway(test_settings):
    return GeminiGateway(settings=test_settings)


@pytest.fixture
def chat_model():
    model = MagicMock()
    model.ainvoke = AsyncMock(
        return_value=AIMessage(content="In the beginning", response_metadata={"finish_reason": "STOP"})
    )
    return model


class TestModelResponse:
    """Test block and emptiness checks."""

    def test_text_is_returned(self):
        assert ModelResponse(text="Amen", finish_reason="STOP").require_text() == "Amen"

    def test_prompt_block_reason(self):
        with pytest.raises(PromptBlockedError, match="Content blocked: SAFETY"):
            ModelResponse(text="", block_reason="SAFETY").require_text()

    def test_prompt_block_is_checked_before_text(self):
        with pytest.raises(PromptBlockedError):
            ModelResponse(text="partial", block_reason="OTHER").require_text()

    def test_recitation_finish_reason(self):
        with pytest.raises(CandidateBlockedError, match="RECITATION"):
            ModelResponse(text="For God so loved", finish_reason="RECITATION").require_text()

    @pytest.mark.parametrize("text", ["", "   \n"])
    def test_empty_text(self, text):
        with pytest.raises(EmptyGenerationError):
            ModelResponse(text=text, finish_reason="STOP").require_text()

    def test_first_inline_part(self):
        response = ModelResponse(parts=[
            ResponsePart(text="Here it is"),
            ResponsePart(inline_data=b"first", mime_type="image/png"),
            ResponsePart(inline_data=b"second", mime_type="image/png"),
        ])
        assert response.first_inline_part().inline_data == b"first"
        assert ModelResponse(parts=[ResponsePart(text="no image")]).first_inline_part() is None

    def test_raise_for_block_ignores_missing_text(self):
        ModelResponse(finish_reason="STOP").raise_for_block()

        with pytest.raises(CandidateBlockedError):
            ModelResponse(finish_reason="SAFETY").raise_for_block()


class TestGatewayInitialization:
    """Provider handles are created lazily."""

    def test_missing_credential_does_not_fail_construction(self):
        gateway = GeminiGateway(settings=Settings(_env_file=None, gemini_api_key=None))
        assert gateway.is_configured is False

    def test_missing_credential_fails_on_first_use(self):
        gateway = GeminiGateway(settings=Settings(_env_file=None, gemini_api_key=None))
        with pytest.raises(CallableError) as exc_info:
            gateway.get_chat_model("gemini-3-flash-preview")
        assert exc_info.value.code is ErrorCode.FAILED_PRECONDITION
        assert exc_info.value.message == "API configuration missing on the server"

    def test_missing_credential_fails_image_client(self):
        gateway = GeminiGateway(settings=Settings(_env_file=None, gemini_api_key=None))
        with pytest.raises(CallableError):
            gateway.get_image_client()

    @patch("src.scripture_api.models.model_gateway.ChatGoogleGenerativeAI")
    def test_chat_model_is_cached_per_model(self, mock_chat, gateway):
        mock_chat.side_effect = lambda **kwargs: MagicMock(model=kwargs["model"])

        first = gateway.get_chat_model("gemini-3-flash-preview")
        again = gateway.get_chat_model("gemini-3-flash-preview")
        other = gateway.get_chat_model("gemini-2.0-flash")

        assert first is again
        assert other is not first
        assert mock_chat.call_count == 2
        kwargs = mock_chat.call_args_list[0][1]
        assert kwargs["model"] == "gemini-3-flash-preview"
        assert kwargs["google_api_key"] == "test-gemini-key"
        assert kwargs["max_retries"] == 1
        assert "temperature" not in kwargs

    @patch("src.scripture_api.models.model_gateway.ChatGoogleGenerativeAI")
    def test_temperature_is_forwarded_when_set(self, mock_chat):
        gateway = GeminiGateway(settings=Settings(_env_file=None, gemini_api_key="k", model_temperature=0.4))
        gateway.get_chat_model("gemini-3-flash-preview")
        assert mock_chat.call_args[1]["temperature"] == 0.4

    def test_configured_models(self, gateway):
        models = gateway.get_configured_models()
        assert models["content"]["model"] == "gemini-2.0-flash"
        assert models["image_hd"]["model"] == "gemini-3-pro-image-preview"


class TestGenerateText:
    """Test text generation through langchain."""

    @pytest.mark.asyncio
    async def test_safety_settings_are_sent(self, gateway, chat_model):
        with patch.object(gateway, "get_chat_model", return_value=chat_model):
            response = await gateway.generate_text(
                "prompt", "gemini-3-flash-preview", safety_settings=PERMISSIVE_SAFETY_SETTINGS
            )

        chat_model.ainvoke.assert_awaited_once_with("prompt", safety_settings=PERMISSIVE_SAFETY_SETTINGS)
        assert response.text == "In the beginning"
        assert response.finish_reason == "STOP"
        assert response.block_reason is None

    @pytest.mark.asyncio
    async def test_prompt_feedback_block_reason(self, gateway, chat_model):
        chat_model.ainvoke.return_value = AIMessage(
            content="", response_metadata={"prompt_feedback": {"block_reason": "PROHIBITED_CONTENT"}}
        )
        with patch.object(gateway, "get_chat_model", return_value=chat_model):
            response = await gateway.generate_text("prompt", "gemini-3-flash-preview")

        assert response.block_reason == "PROHIBITED_CONTENT"

    @pytest.mark.asyncio
    async def test_unset_block_reason_is_ignored(self, gateway, chat_model):
        chat_model.ainvoke.return_value = AIMessage(
            content="ok", response_metadata={"prompt_feedback": {"block_reason": 0}}
        )
        with patch.object(gateway, "get_chat_model", return_value=chat_model):
            response = await gateway.generate_text("prompt", "gemini-3-flash-preview")

        assert response.block_reason is None

    @pytest.mark.asyncio
    async def test_content_blocks_are_joined(self, gateway, chat_model):
        chat_model.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Grace "}, "and peace"], response_metadata={}
        )
        with patch.object(gateway, "get_chat_model", return_value=chat_model):
            response = await gateway.generate_text("prompt", "gemini-3-flash-preview")

        assert response.text == "Grace and peace"


class TestGenerateImage:
    """Test image generation through google-genai."""

    @staticmethod
    def _image_response(parts, finish_reason="STOP"):
        return SimpleNamespace(
            candidates=[SimpleNamespace(finish_reason=finish_reason, content=SimpleNamespace(parts=parts))],
            prompt_feedback=None,
        )

    @pytest.mark.asyncio
    async def test_parts_and_aspect_ratio(self, gateway):
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=self._image_response([
            SimpleNamespace(text="Here is your image", inline_data=None),
            SimpleNamespace(text=None, inline_data=SimpleNamespace(data=b"\x89PNG", mime_type="image/png")),
        ]))

        with patch.object(gateway, "get_image_client", return_value=client):
            response = await gateway.generate_image("The ark", "gemini-2.5-flash-image", aspect_ratio="16:9")

        kwargs = client.aio.models.generate_content.await_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash-image"
        assert kwargs["contents"] == "The ark"
        assert kwargs["config"].image_config.aspect_ratio == "16:9"
        assert response.text == "Here is your image"
        assert response.first_inline_part().inline_data == b"\x89PNG"
        assert response.first_inline_part().mime_type == "image/png"

    @pytest.mark.asyncio
    async def test_no_candidates(self, gateway):
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(
            return_value=SimpleNamespace(candidates=[], prompt_feedback=None)
        )

        with patch.object(gateway, "get_image_client", return_value=client):
            response = await gateway.generate_image("The ark", "gemini-2.5-flash-image")

        assert response.parts == []
        assert client.aio.models.generate_content.await_args.kwargs["config"].image_config is None

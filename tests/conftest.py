"""Shared fixtures for the scripture study API tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient

from src.scripture_api.api.main import create_app
from src.scripture_api.auth import AuthContext
from src.scripture_api.config import Settings
from src.scripture_api.models.model_gateway import GeminiGateway, ModelResponse, get_model_gateway


VALID_TOKEN = "valid-token"


@pytest.fixture
def test_settings():
    """Settings with a credential and the default model routing."""
    return Settings(_env_file=None, gemini_api_key="test-gemini-key")


@pytest.fixture
def user():
    """An authenticated caller."""
    return AuthContext(uid="user-123", claims={"uid": "user-123"})


@pytest.fixture
def gateway(test_settings):
    """Model gateway double; every call answers with plain text by default."""
    gateway = MagicMock(spec=GeminiGateway)
    gateway.settings = test_settings
    gateway.is_configured = True
    gateway.get_configured_models.return_value = {
        "text": {"model": test_settings.text_model, "capabilities": ["text", "json"]},
    }
    gateway.generate_text = AsyncMock(return_value=ModelResponse(text="A generated answer"))
    gateway.generate_image = AsyncMock(return_value=ModelResponse())
    return gateway


@pytest.fixture
def no_sleep():
    """Backoff sleep that returns immediately."""
    return AsyncMock()


@pytest.fixture
def verify_token():
    """Patch Firebase token verification: only VALID_TOKEN is accepted."""
    def _verify(id_token):
        if id_token == VALID_TOKEN:
            return {"uid": "user-123", "email": "reader@example.com"}
        raise ValueError("Token verification failed")

    with patch("src.scripture_api.firebase.verify_id_token", side_effect=_verify) as mock_verify:
        yield mock_verify


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def app(gateway, verify_token):
    """Fresh app wired to the gateway double."""
    app = create_app()
    app.dependency_overrides[get_model_gateway] = lambda: gateway
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)

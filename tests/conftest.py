"""
Pytest configuration and shared fixtures for GenAI gateway testing.
"""
import io
import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from genai_gateway.config import GeminiConfig
from genai_gateway.gateway import AIGateway, ClientProvider


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    original_env = dict(os.environ)

    test_env = {
        "GEMINI_API_KEY": "test_gemini_key",
        "TEXT_MODEL": "gemini-test-text",
        "IMAGE_MODEL": "imagen-test",
        "IMAGE_EDIT_MODEL": "gemini-test-image",
        "LOG_LEVEL": "DEBUG",
    }

    os.environ.update(test_env)
    yield test_env

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def gemini_config():
    """Gemini configuration with a dummy key and default models."""
    return GeminiConfig(
        api_key="test_gemini_key",
        text_model="gemini-2.5-flash",
        image_model="imagen-4.0-generate-001",
        image_edit_model="gemini-2.5-flash-image-preview",
    )


@pytest.fixture
def mock_client():
    """Mock genai.Client whose async model calls can be scripted."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock()
    client.aio.models.generate_images = AsyncMock()
    return client


@pytest.fixture
def client_factory(mock_client):
    return MagicMock(return_value=mock_client)


@pytest.fixture
def gateway(gemini_config, client_factory):
    """Gateway wired to the mock client."""
    provider = ClientProvider(gemini_config, client_factory=client_factory)
    return AIGateway(provider, gemini_config)


@pytest.fixture
def png_bytes():
    """A tiny real PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 40, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

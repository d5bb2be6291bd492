"""
Gateway to Google's generative AI services.

This module provides:
1. Text, structured JSON and image+text generation with Gemini
2. Image generation with Imagen and image editing with Gemini's image model
3. Normalized errors for missing or rejected credentials and failed calls
"""

from typing import Optional

from ..config import GeminiConfig
from .classifier import classify_error
from .client import ClientProvider
from .images import ImageInput, load_image, save_data_uri, to_data_uri
from .service import AIGateway


def create_gateway(config: Optional[GeminiConfig] = None) -> AIGateway:
    """
    Factory function to create a gateway.

    The SDK client is not built here; that happens on the first operation.

    Args:
        config: Optional GeminiConfig. If None, uses default config.

    Returns:
        AIGateway instance
    """
    if config is None:
        from ..config import get_config

        config = get_config().gemini

    return AIGateway(ClientProvider(config), config)


__all__ = [
    "AIGateway",
    "ClientProvider",
    "ImageInput",
    "classify_error",
    "create_gateway",
    "load_image",
    "save_data_uri",
    "to_data_uri",
]

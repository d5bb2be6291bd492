"""
Async gateway exposing the generation operations to the application.
"""

from typing import Any, Dict, List, Optional, Union

from ..config import GeminiConfig
from ..utils.logger import LoggerMixin
from .classifier import classify_error
from .client import ClientProvider
from .images import ImageSource, load_image
from .requests import (
    ColorPaletteRequest,
    GenerationRequest,
    ImageEditRequest,
    ImageRequest,
    Payload,
    StructuredTextRequest,
    TextRequest,
    TextWithImageRequest,
    build_payload,
)
from .responses import (
    RawTextResult,
    StructuredResult,
    unwrap_edit,
    unwrap_images,
    unwrap_structured,
    unwrap_text,
    unwrap_text_with_image,
)


class AIGateway(LoggerMixin):
    """
    Generation operations backed by Gemini and Imagen.

    Each operation performs exactly one remote call. Every failure, whether
    raised by the SDK or while decoding the response, goes through
    ``classify_error`` once before reaching the caller.
    """

    def __init__(self, provider: ClientProvider, config: GeminiConfig):
        super().__init__()
        self.provider = provider
        self.config = config

    async def _execute(self, client: Any, request: GenerationRequest) -> Any:
        payload: Payload = build_payload(request, self.config)
        method = getattr(client.aio.models, payload.method)
        return await method(model=payload.model, **payload.arguments)

    async def generate_image(self, prompt: str, count: int = 1) -> List[str]:
        """
        Generate images for a prompt.

        Args:
            prompt: Text prompt for image generation
            count: Number of images to request

        Returns:
            List of image data URIs
        """
        try:
            self.log_info("Generating image", prompt=prompt[:50], count=count)
            client = self.provider.get_client()
            response = await self._execute(
                client, ImageRequest(prompt=prompt, count=count)
            )
            return unwrap_images(response, self.config.image_mime_type).images
        except Exception as e:
            classify_error(e, "generate image")

    async def generate_text(self, prompt: str) -> str:
        try:
            self.log_info("Generating text", prompt=prompt[:50])
            client = self.provider.get_client()
            response = await self._execute(client, TextRequest(prompt=prompt))
            return unwrap_text(response).text
        except Exception as e:
            classify_error(e, "generate text")

    async def generate_structured_text(self, prompt: str, schema: Any) -> Any:
        """Generate JSON constrained to ``schema`` and return it decoded."""
        try:
            self.log_info("Generating structured text", prompt=prompt[:50])
            client = self.provider.get_client()
            response = await self._execute(
                client, StructuredTextRequest(prompt=prompt, schema=schema)
            )
            return unwrap_structured(response).value
        except Exception as e:
            classify_error(e, "generate structured text")

    async def generate_text_with_image(
        self,
        prompt: str,
        image: ImageSource,
        is_json: bool = False,
        mime_type: Optional[str] = None,
    ) -> Union[str, Any, Dict[str, str]]:
        """
        Ask about an image.

        Args:
            prompt: Question or instruction about the image
            image: Image path, bytes or file-like object
            is_json: Request a JSON answer
            mime_type: MIME type of ``image``; detected when omitted

        Returns:
            The answer text; the decoded JSON when ``is_json`` is set, or
            ``{"rawResponse": text}`` if the model did not answer in JSON
        """
        try:
            self.log_info(
                "Generating text with image", prompt=prompt[:50], is_json=is_json
            )
            client = self.provider.get_client()
            image_input = await load_image(image, mime_type)
            response = await self._execute(
                client,
                TextWithImageRequest(prompt=prompt, image=image_input, is_json=is_json),
            )
            result = unwrap_text_with_image(response, is_json)
        except Exception as e:
            classify_error(e, "generate text with image")

        if isinstance(result, RawTextResult):
            self.log_warning("Model did not honor the JSON response format")
            return result.to_value()
        if isinstance(result, StructuredResult):
            return result.value
        return result.text

    async def edit_image(
        self, prompt: str, image: ImageSource, mime_type: Optional[str] = None
    ) -> Dict[str, Optional[str]]:
        """
        Edit an image following a text instruction.

        Returns:
            ``{"text": ..., "image": ...}`` where ``image`` is a data URI and
            ``text`` is the model's commentary, if any
        """
        try:
            self.log_info("Editing image", prompt=prompt[:50])
            client = self.provider.get_client()
            image_input = await load_image(image, mime_type)
            response = await self._execute(
                client, ImageEditRequest(prompt=prompt, image=image_input)
            )
            return unwrap_edit(response).to_value()
        except Exception as e:
            classify_error(e, "edit image")

    async def generate_color_palette(self, theme: str) -> List[Dict[str, str]]:
        """
        Generate a five colour palette for a theme.

        Returns:
            List of ``{"name": ..., "hex": ...}`` entries as returned by the model
        """
        try:
            self.log_info("Generating color palette", theme=theme)
            client = self.provider.get_client()
            response = await self._execute(client, ColorPaletteRequest(theme=theme))
            result = unwrap_structured(response).value

            palette = result.get("palette") if isinstance(result, dict) else None
            if not isinstance(palette, list):
                raise ValueError("Invalid response format from API.")
            return palette
        except Exception as e:
            classify_error(e, "generate color palette")

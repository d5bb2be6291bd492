"""
Request variants and the payloads they are sent as.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from google.genai import types

from ..config import GeminiConfig
from .images import ImageInput

JSON_MIME_TYPE = "application/json"

PALETTE_PROMPT = (
    "Generate a color palette with 5 colors for the theme: {theme}. "
    "Provide creative names for each color."
)

PALETTE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "palette": types.Schema(
            type=types.Type.ARRAY,
            description="An array of 5 color objects.",
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "name": types.Schema(
                        type=types.Type.STRING,
                        description="The creative name of the color.",
                    ),
                    "hex": types.Schema(
                        type=types.Type.STRING,
                        description="The hex code for the color (e.g., #RRGGBB).",
                    ),
                },
                required=["name", "hex"],
            ),
        ),
    },
    required=["palette"],
)


@dataclass(frozen=True)
class ImageRequest:
    prompt: str
    count: int = 1


@dataclass(frozen=True)
class TextRequest:
    prompt: str


@dataclass(frozen=True)
class StructuredTextRequest:
    prompt: str
    schema: Any


@dataclass(frozen=True)
class TextWithImageRequest:
    prompt: str
    image: ImageInput
    is_json: bool = False


@dataclass(frozen=True)
class ImageEditRequest:
    prompt: str
    image: ImageInput


@dataclass(frozen=True)
class ColorPaletteRequest:
    theme: str

    def to_structured(self) -> StructuredTextRequest:
        return StructuredTextRequest(
            prompt=PALETTE_PROMPT.format(theme=self.theme), schema=PALETTE_SCHEMA
        )


GenerationRequest = Union[
    ImageRequest,
    TextRequest,
    StructuredTextRequest,
    TextWithImageRequest,
    ImageEditRequest,
    ColorPaletteRequest,
]


@dataclass(frozen=True)
class Payload:
    """
    One remote call, ready to be dispatched.

    ``method`` names the ``client.models`` coroutine to call; ``arguments``
    are the keyword arguments passed to it.
    """

    method: str
    model: str
    arguments: Dict[str, Any]

    @property
    def config(self) -> Optional[Any]:
        return self.arguments.get("config")


def _image_and_text(image: ImageInput, prompt: str) -> List[types.Part]:
    return [image.to_part(), types.Part.from_text(text=prompt)]


def build_payload(request: GenerationRequest, config: GeminiConfig) -> Payload:
    """
    Shape the outbound call for a request.

    Args:
        request: Any GenerationRequest variant
        config: Model ids and fixed image output settings

    Returns:
        Payload for ``client.aio.models``

    Raises:
        TypeError: for anything that is not a known request kind
    """
    if isinstance(request, ImageRequest):
        return Payload(
            method="generate_images",
            model=config.image_model,
            arguments={
                "prompt": request.prompt,
                "config": types.GenerateImagesConfig(
                    number_of_images=request.count,
                    output_mime_type=config.image_mime_type,
                    aspect_ratio=config.aspect_ratio,
                ),
            },
        )

    if isinstance(request, TextRequest):
        return Payload(
            method="generate_content",
            model=config.text_model,
            arguments={"contents": request.prompt},
        )

    if isinstance(request, StructuredTextRequest):
        return Payload(
            method="generate_content",
            model=config.text_model,
            arguments={
                "contents": request.prompt,
                "config": types.GenerateContentConfig(
                    response_mime_type=JSON_MIME_TYPE,
                    response_schema=request.schema,
                ),
            },
        )

    if isinstance(request, TextWithImageRequest):
        arguments = {"contents": _image_and_text(request.image, request.prompt)}
        if request.is_json:
            arguments["config"] = types.GenerateContentConfig(
                response_mime_type=JSON_MIME_TYPE
            )
        return Payload(
            method="generate_content", model=config.text_model, arguments=arguments
        )

    if isinstance(request, ImageEditRequest):
        return Payload(
            method="generate_content",
            model=config.image_edit_model,
            arguments={
                "contents": _image_and_text(request.image, request.prompt),
                "config": types.GenerateContentConfig(
                    response_modalities=[types.Modality.IMAGE, types.Modality.TEXT],
                ),
            },
        )

    if isinstance(request, ColorPaletteRequest):
        return build_payload(request.to_structured(), config)

    raise TypeError(f"Unsupported request kind: {type(request).__name__}")

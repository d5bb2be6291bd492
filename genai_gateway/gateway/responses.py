"""
Result variants and the unwrappers that extract them from SDK responses.
"""

import base64
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .images import to_data_uri

RAW_RESPONSE_KEY = "rawResponse"


@dataclass(frozen=True)
class ImageListResult:
    images: List[str]


@dataclass(frozen=True)
class TextResult:
    text: str


@dataclass(frozen=True)
class StructuredResult:
    value: Any


@dataclass(frozen=True)
class RawTextResult:
    """Text the model returned when JSON was requested but not produced."""

    raw_response: str

    def to_value(self) -> Dict[str, str]:
        return {RAW_RESPONSE_KEY: self.raw_response}


@dataclass(frozen=True)
class EditResult:
    text: Optional[str]
    image: Optional[str]

    def to_value(self) -> Dict[str, Optional[str]]:
        return {"text": self.text, "image": self.image}


def _as_bytes(data: Any) -> bytes:
    # The SDK decodes inline data to bytes; a raw REST body may still hold base64 text
    if isinstance(data, str):
        return base64.b64decode(data)
    return data


def unwrap_images(response: Any, mime_type: str) -> ImageListResult:
    """Turn every generated image into a data URI."""
    generated = getattr(response, "generated_images", None)
    if not generated:
        raise ValueError("No images were generated.")

    return ImageListResult(
        images=[
            to_data_uri(_as_bytes(item.image.image_bytes), mime_type)
            for item in generated
        ]
    )


def unwrap_text(response: Any) -> TextResult:
    return TextResult(text=(response.text or "").strip())


def unwrap_structured(response: Any) -> StructuredResult:
    """Parse the response text as JSON; decode errors propagate."""
    return StructuredResult(value=json.loads(unwrap_text(response).text))


def unwrap_text_with_image(
    response: Any, is_json: bool
) -> Union[TextResult, StructuredResult, RawTextResult]:
    """
    Extract the answer to an image+text prompt.

    When JSON was requested but the model answered with something else, the
    raw text is handed back instead of failing.
    """
    text = response.text or ""
    if not is_json:
        return TextResult(text=text)

    try:
        return StructuredResult(value=json.loads(text))
    except json.JSONDecodeError:
        return RawTextResult(raw_response=text)


def unwrap_edit(response: Any) -> EditResult:
    """
    Collect the text and image parts of an image-edit response.

    Later parts overwrite earlier ones of the same kind.
    """
    text = None
    image = None

    candidates = getattr(response, "candidates", None) or []
    content = candidates[0].content if candidates else None
    parts = (content.parts if content is not None else None) or []

    for part in parts:
        if part.text:
            text = part.text
        elif part.inline_data is not None:
            image = to_data_uri(
                _as_bytes(part.inline_data.data), part.inline_data.mime_type
            )

    if image is None:
        raise ValueError("The service did not return an edited image.")

    return EditResult(text=text, image=image)

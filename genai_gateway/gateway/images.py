"""
Image input loading and data-URI helpers.
"""

import asyncio
import base64
import io
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

from google.genai import types
from PIL import Image, UnidentifiedImageError

from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImageInput:
    """Raw image bytes together with their MIME type."""

    data: bytes
    mime_type: str

    def to_part(self) -> types.Part:
        """Wrap the image as an inline-data content part."""
        return types.Part.from_bytes(data=self.data, mime_type=self.mime_type)


ImageSource = Union[str, Path, bytes, bytearray, BinaryIO, ImageInput]


def detect_mime_type(data: bytes, filename: Optional[str] = None) -> str:
    """
    Work out the MIME type of an encoded image.

    Pillow is asked first; the file extension is only used when Pillow
    cannot identify the bytes.

    Raises:
        ValueError: if neither source yields an image MIME type
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            mime_type = Image.MIME.get(image.format or "")
    except (UnidentifiedImageError, OSError):
        mime_type = None

    if not mime_type and filename:
        mime_type, _ = mimetypes.guess_type(filename)

    if not mime_type or not mime_type.startswith("image/"):
        raise ValueError("Could not determine the image MIME type")

    return mime_type


def _read_source(source: ImageSource) -> Tuple[bytes, Optional[str]]:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source), None
    if isinstance(source, (str, Path)):
        path = Path(source)
        return path.read_bytes(), path.name
    return source.read(), getattr(source, "name", None)


async def load_image(source: ImageSource, mime_type: Optional[str] = None) -> ImageInput:
    """
    Load an image from a path, raw bytes or a binary file object.

    Reading happens in a worker thread so the event loop is not blocked.

    Args:
        source: Image path, bytes or file-like object
        mime_type: Explicit MIME type; detected from the content when omitted

    Returns:
        ImageInput ready to be sent as a content part
    """
    if isinstance(source, ImageInput):
        return source

    data, filename = await asyncio.to_thread(_read_source, source)
    if mime_type is None:
        mime_type = detect_mime_type(data, filename)

    logger.debug("Loaded image input", mime_type=mime_type, size=len(data))
    return ImageInput(data=data, mime_type=mime_type)


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encode image bytes as a ``data:`` URI."""
    return f"data:{mime_type};base64,{base64.b64encode(data).decode()}"


def parse_data_uri(uri: str) -> ImageInput:
    """Split a base64 ``data:`` URI back into bytes and MIME type."""
    header, sep, payload = uri.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URI")

    mime_type = header[len("data:") : -len(";base64")]
    return ImageInput(data=base64.b64decode(payload), mime_type=mime_type)


def save_data_uri(uri: str, filename: str, format: Optional[str] = None) -> str:
    """
    Save an image data URI to a file.

    Args:
        uri: Data URI as returned by the gateway
        filename: Output filename
        format: Image format (PNG, JPEG, etc.); inferred from the filename when omitted

    Returns:
        Path to saved file
    """
    image_input = parse_data_uri(uri)

    try:
        image = Image.open(io.BytesIO(image_input.data))
        image.save(filename, format=format)
        logger.info("Image saved successfully", filename=filename)
        return filename

    except Exception as e:
        logger.error(
            "Failed to save image",
            filename=filename,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

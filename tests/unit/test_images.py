"""
Unit tests for image input loading and data URI helpers.
"""
import base64
import io

import pytest
from PIL import Image

from genai_gateway.gateway.images import (
    ImageInput,
    detect_mime_type,
    load_image,
    parse_data_uri,
    save_data_uri,
    to_data_uri,
)


class TestDetectMimeType:
    """Test cases for MIME detection."""

    def test_from_content(self, png_bytes):
        assert detect_mime_type(png_bytes) == "image/png"

    def test_content_wins_over_extension(self, png_bytes):
        assert detect_mime_type(png_bytes, "photo.jpg") == "image/png"

    def test_extension_fallback(self):
        assert detect_mime_type(b"not an image", "photo.jpg") == "image/jpeg"

    def test_undetectable(self):
        with pytest.raises(ValueError, match="MIME type"):
            detect_mime_type(b"not an image", "notes.txt")


class TestLoadImage:
    """Test cases for load_image."""

    @pytest.mark.asyncio
    async def test_from_bytes(self, png_bytes):
        image = await load_image(png_bytes)
        assert image == ImageInput(data=png_bytes, mime_type="image/png")

    @pytest.mark.asyncio
    async def test_from_path(self, tmp_path, png_bytes):
        path = tmp_path / "input.png"
        path.write_bytes(png_bytes)

        image = await load_image(path)
        assert image.data == png_bytes
        assert image.mime_type == "image/png"

        image = await load_image(str(path))
        assert image.data == png_bytes

    @pytest.mark.asyncio
    async def test_from_file_object(self, png_bytes):
        image = await load_image(io.BytesIO(png_bytes))
        assert image.mime_type == "image/png"

    @pytest.mark.asyncio
    async def test_explicit_mime_type(self):
        image = await load_image(b"raw", mime_type="image/heic")
        assert image == ImageInput(data=b"raw", mime_type="image/heic")

    @pytest.mark.asyncio
    async def test_image_input_passthrough(self):
        original = ImageInput(data=b"raw", mime_type="image/png")
        assert await load_image(original) is original

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await load_image(tmp_path / "missing.png")


class TestDataUri:
    """Test cases for data URI helpers."""

    def test_to_data_uri(self):
        assert to_data_uri(b"abc", "image/png") == "data:image/png;base64,YWJj"

    def test_parse_data_uri(self):
        assert parse_data_uri("data:image/png;base64,YWJj") == ImageInput(
            data=b"abc", mime_type="image/png"
        )

    @pytest.mark.parametrize(
        "uri", ["image/png;base64,YWJj", "data:image/png,YWJj", "data:image/png"]
    )
    def test_parse_rejects_malformed(self, uri):
        with pytest.raises(ValueError, match="Not a base64 data URI"):
            parse_data_uri(uri)

    def test_save_data_uri(self, tmp_path, png_bytes):
        uri = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
        target = tmp_path / "out.png"

        assert save_data_uri(uri, str(target)) == str(target)
        with Image.open(target) as saved:
            assert saved.size == (4, 4)

"""Tests for decoding picked photos."""

from __future__ import annotations

import io
from types import SimpleNamespace

import pytest
from PIL import Image, UnidentifiedImageError

from picker import decode_image, read_upload


def _encode(image: Image.Image, fmt: str, **params: object) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt, **params)
    return buffer.getvalue()


def _upload(data: bytes, name: str = "photo.png") -> SimpleNamespace:
    return SimpleNamespace(name=name, getvalue=lambda: data)


class TestDecodeImage:
    def test_decodes_jpeg(self) -> None:
        data = _encode(Image.new("RGB", (40, 20), "red"), "JPEG")

        image = decode_image(data)

        assert image.mode == "RGB"
        assert image.size == (40, 20)

    def test_converts_transparent_png_to_rgb(self) -> None:
        data = _encode(Image.new("RGBA", (8, 8), (0, 0, 255, 128)), "PNG")
        assert decode_image(data).mode == "RGB"

    def test_applies_exif_orientation(self) -> None:
        exif = Image.Exif()
        exif[0x0112] = 6  # rotated 90 degrees clockwise
        data = _encode(Image.new("RGB", (40, 20)), "JPEG", exif=exif)

        assert decode_image(data).size == (20, 40)

    def test_rejects_non_image_bytes(self) -> None:
        with pytest.raises(UnidentifiedImageError):
            decode_image(b"definitely not a photo")

    def test_oversized_image_raises_decompression_bomb(self, monkeypatch: pytest.MonkeyPatch) -> None:
        data = _encode(Image.new("RGB", (40, 40)), "PNG")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        with pytest.raises(Image.DecompressionBombError):
            decode_image(data)


class TestReadUpload:
    def test_returns_decoded_photo(self) -> None:
        data = _encode(Image.new("RGB", (12, 8), "green"), "PNG")

        image = read_upload(_upload(data))

        assert image is not None
        assert image.size == (12, 8)

    def test_non_image_gives_none(self) -> None:
        assert read_upload(_upload(b"definitely not a photo", "notes.png")) is None

    def test_oversized_image_gives_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        data = _encode(Image.new("RGB", (40, 40)), "PNG")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        assert read_upload(_upload(data, "huge.png")) is None

import io

import pytest
from PIL import Image


def _encode(image: Image.Image, fmt: str = "PNG", **params) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt, **params)
    return buf.getvalue()


@pytest.fixture
def encode():
    """Serialize a PIL image to bytes in the given format (PNG by default)."""
    return _encode


@pytest.fixture
def pixels_to_png():
    """Encode a row-major list of RGB tuples as a PNG."""

    def make(pixels, width: int, height: int) -> bytes:
        img = Image.new("RGB", (width, height))
        img.putdata(pixels)
        return _encode(img)

    return make


@pytest.fixture
def solid_png():
    def make(colour=(128, 128, 128), size=(40, 20)):
        return _encode(Image.new("RGB", size, colour))

    return make


@pytest.fixture
def gradient_png():
    """Horizontal black-to-white gradient, 256 x 32."""
    img = Image.new("RGB", (256, 32))
    img.putdata([(x, x, x) for _ in range(32) for x in range(256)])
    return _encode(img)


@pytest.fixture
def jpeg_bytes():
    return _encode(Image.new("RGB", (64, 48), (200, 30, 30)), "JPEG")

"""Tests for photo downscaling and data URI helpers."""

import base64
import io

import pytest
from PIL import Image

from hunt.core.imaging import (
    InvalidDataURI,
    InvalidImage,
    compress_data_uri,
    compress_image,
    is_image_data_uri,
    parse_data_uri,
    scaled_size,
    to_data_uri,
)


def _png(size: tuple[int, int], mode: str = "RGB", color=(200, 30, 30)) -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


def _open(data: bytes) -> Image.Image:
    img = Image.open(io.BytesIO(data))
    img.load()
    return img


def test_scaled_size():
    """Test the longest side is capped and aspect ratio kept."""
    assert scaled_size(2400, 1200, 1200) == (1200, 600)
    assert scaled_size(1000, 3000, 1500) == (500, 1500)
    assert scaled_size(800, 600, 1200) == (800, 600)


def test_compress_image_downscales():
    """Test large images shrink to the max dimension as JPEG."""
    result = _open(compress_image(_png((2400, 1200)), max_dimension=1200))

    assert result.format == "JPEG"
    assert result.size == (1200, 600)


def test_compress_image_never_upscales():
    """Test small images keep their size."""
    result = _open(compress_image(_png((320, 240)), max_dimension=1200))

    assert result.size == (320, 240)


def test_compress_image_flattens_alpha():
    """Test transparent images become RGB on white."""
    data = _png((10, 10), mode="RGBA", color=(0, 0, 0, 0))

    result = _open(compress_image(data))

    assert result.mode == "RGB"
    r, g, b = result.getpixel((5, 5))
    assert min(r, g, b) > 240


def test_compress_image_applies_exif_orientation():
    """Test EXIF rotation is applied before scaling."""
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 CW on display
    buf = io.BytesIO()
    Image.new("RGB", (200, 100), (0, 0, 255)).save(buf, format="JPEG", exif=exif.tobytes())

    result = _open(compress_image(buf.getvalue()))

    assert result.size == (100, 200)


def test_compress_image_lower_quality_is_smaller():
    """Test quality controls output size."""
    img = Image.effect_noise((400, 400), 64).convert("RGB")
    buf = io.BytesIO()
    img.save(buf, format="PNG")

    high = compress_image(buf.getvalue(), quality=95)
    low = compress_image(buf.getvalue(), quality=20)

    assert len(low) < len(high)


def test_compress_image_invalid_bytes():
    """Test undecodable input raises InvalidImage."""
    with pytest.raises(InvalidImage):
        compress_image(b"definitely not an image")


@pytest.mark.parametrize("kwargs", [{"max_dimension": 0}, {"quality": 0}, {"quality": 100}])
def test_compress_image_bad_arguments(kwargs):
    """Test out-of-range arguments are refused."""
    with pytest.raises(ValueError):
        compress_image(_png((10, 10)), **kwargs)


def test_parse_data_uri():
    """Test MIME type and payload are extracted."""
    mime, payload = parse_data_uri("data:image/PNG;base64,AAA=")

    assert mime == "image/png"
    assert payload == b"\x00\x00"


def test_parse_data_uri_with_params():
    """Test MIME parameters before ;base64 are allowed."""
    mime, payload = parse_data_uri("data:image/jpeg;name=a.jpg;base64,/9j/")

    assert mime == "image/jpeg"
    assert payload == base64.b64decode("/9j/")


@pytest.mark.parametrize(
    "uri",
    [
        "",
        "https://example.com/photo.jpg",
        "data:image/png,plain-not-base64",
        "data:image/png;base64,@@@",
    ],
)
def test_parse_data_uri_invalid(uri):
    """Test malformed data URIs raise InvalidDataURI."""
    with pytest.raises(InvalidDataURI):
        parse_data_uri(uri)


def test_is_image_data_uri():
    """Test only image MIME types pass."""
    assert is_image_data_uri("data:image/png;base64,AAA=")
    assert not is_image_data_uri("data:text/plain;base64,AAA=")
    assert not is_image_data_uri(None)
    assert not is_image_data_uri("AAA=")
    assert not is_image_data_uri("data:image/png;base64,")


def test_compress_data_uri():
    """Test a PNG data URI comes back as a smaller JPEG data URI."""
    uri = to_data_uri(_png((1600, 1600)), mime="image/png")

    result = compress_data_uri(uri, max_dimension=400)

    mime, payload = parse_data_uri(result)
    assert mime == "image/jpeg"
    assert _open(payload).size == (400, 400)

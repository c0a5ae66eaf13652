"""Photo downscaling and data URI helpers.

Clients shrink photos before posting them to ``/api/upload`` so the stored
data URI stays small. These functions do that transform without any UI or
server dependency: bytes in, bytes out.
"""

import base64
import binascii
import io
import re

from PIL import Image, ImageOps, UnidentifiedImageError

DEFAULT_MAX_DIMENSION = 1200
DEFAULT_QUALITY = 70

_DATA_URI_RE = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)(?P<params>(?:;[\w.+-]+=[\w.+-]+)*);base64,(?P<data>.*)$",
    re.DOTALL,
)


class InvalidDataURI(ValueError):
    """Raised when a string is not a base64 data URI."""


class InvalidImage(ValueError):
    """Raised when bytes cannot be decoded as an image."""


def parse_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a base64 data URI into its MIME type and decoded payload."""
    match = _DATA_URI_RE.match(uri.strip()) if uri else None
    if not match:
        raise InvalidDataURI("Not a base64 data URI")
    try:
        payload = base64.b64decode(match.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidDataURI(f"Invalid base64 payload: {e}") from e
    return match.group("mime").lower(), payload


def to_data_uri(data: bytes, mime: str = "image/jpeg") -> str:
    """Encode bytes as a base64 data URI."""
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def is_image_data_uri(uri: str | None) -> bool:
    """Check that a value is a ``data:image/...;base64,`` URI with a non-empty payload."""
    if not uri:
        return False
    try:
        mime, payload = parse_data_uri(uri)
    except InvalidDataURI:
        return False
    return mime.startswith("image/") and len(payload) > 0


def scaled_size(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Size that fits within max_dimension on its longest side. Never upscales."""
    longest = max(width, height)
    if longest <= max_dimension:
        return width, height
    ratio = max_dimension / longest
    return max(1, round(width * ratio)), max(1, round(height * ratio))


def compress_image(
    data: bytes,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    quality: int = DEFAULT_QUALITY,
) -> bytes:
    """
    Downscale and re-encode an image as JPEG.

    - **data**: raw image bytes in any format Pillow can read
    - **max_dimension**: longest side of the result, in pixels
    - **quality**: JPEG quality, 1-95

    EXIF orientation is applied before scaling; transparency is flattened
    onto white since JPEG has no alpha channel.
    """
    if max_dimension < 1:
        raise ValueError("max_dimension must be positive")
    if not 1 <= quality <= 95:
        raise ValueError("quality must be between 1 and 95")

    try:
        with Image.open(io.BytesIO(data)) as img:
            img = ImageOps.exif_transpose(img)
            img = _flatten(img)
            size = scaled_size(img.width, img.height, max_dimension)
            if size != img.size:
                img = img.resize(size, Image.Resampling.LANCZOS)

            out = io.BytesIO()
            img.save(out, format="JPEG", quality=quality, optimize=True)
            return out.getvalue()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImage(f"Cannot decode image: {e}") from e


def compress_data_uri(
    uri: str,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    quality: int = DEFAULT_QUALITY,
) -> str:
    """Compress the image inside a data URI and return a JPEG data URI."""
    _, payload = parse_data_uri(uri)
    return to_data_uri(compress_image(payload, max_dimension, quality))


def _flatten(img: Image.Image) -> Image.Image:
    """Convert to RGB, compositing any alpha onto a white background."""
    if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
        rgba = img.convert("RGBA")
        background = Image.new("RGB", rgba.size, (255, 255, 255))
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    if img.mode != "RGB":
        return img.convert("RGB")
    return img

"""Embedded photo decoding."""

import base64
import binascii
import io
import re
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

DATA_URL_PATTERN = re.compile(r"data:image/([a-zA-Z0-9.+-]+);base64,(.*)", re.DOTALL)

# Raster formats fpdf2 can embed
SUPPORTED_FORMATS = frozenset({"JPEG", "PNG", "GIF"})


class PhotoError(ValueError):
    """Raised when an embedded photo cannot be decoded."""


@dataclass(frozen=True)
class DecodedPhoto:
    data: bytes
    format: str


def decode_photo(value: str) -> DecodedPhoto:
    """Decode a ``data:image/...;base64,`` URL (or bare base64) into image bytes.

    The pixel data is fully loaded with Pillow, the library fpdf2 itself parses
    images with, so a photo accepted here is one the PDF surface can embed.

    Raises:
        PhotoError: If the value is not valid base64, not a JPEG/PNG/GIF
            image, or the image data is truncated or corrupt.
    """
    value = value.strip()
    match = DATA_URL_PATTERN.fullmatch(value)
    payload = match.group(2) if match else value
    declared = match.group(1).upper() if match else "unknown"

    try:
        data = base64.b64decode("".join(payload.split()), validate=True)
    except binascii.Error as e:
        raise PhotoError(f"Photo is not valid base64: {e}") from e

    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.load()
    except UnidentifiedImageError as e:
        raise PhotoError(f"Unsupported photo encoding (declared: {declared})") from e
    except (OSError, SyntaxError, ValueError) as e:
        raise PhotoError(f"Photo image data is corrupt: {e}") from e

    if image_format not in SUPPORTED_FORMATS:
        raise PhotoError(
            f"Unsupported photo encoding (declared: {declared}, found: {image_format})"
        )
    return DecodedPhoto(data=data, format=image_format)

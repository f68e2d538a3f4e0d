# 📄 File: app/shared/infrastructure/storage/file_manager.py
#
# 🧭 Purpose (Layman Explanation):
# Checks pictures people upload (profile photos, club and event banners) before they are
# stored: the data must really be an image, not too big, and gets shrunk to a sensible size.
#
# 🧪 Purpose (Technical Summary):
# Base64 decoding, size validation and Pillow-based normalization (EXIF orientation, RGB,
# bounded dimensions, progressive JPEG) for uploaded images.
#
# 🔗 Dependencies:
# - PIL (Pillow): Image decoding and re-encoding
# - base64/binascii: Payload decoding
#
# 🔄 Connected Modules / Calls From:
# - supabase_storage.py (before every upload)

import base64
import binascii
import io
import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from app.shared.core.exceptions import InvalidImageError

_DATA_URL_PREFIX = re.compile(r"^data:image/[\w.+-]+;base64,", re.IGNORECASE)

MAX_IMAGE_DIMENSIONS: Tuple[int, int] = (2048, 2048)
JPEG_QUALITY = 85


@dataclass(frozen=True)
class ProcessedImage:
    data: bytes
    content_type: str
    extension: str
    width: int
    height: int


def decode_base64_image(payload: str, max_bytes: int) -> bytes:
    """
    Decode a base64 image payload, accepting an optional data-URL prefix.

    Raises:
        InvalidImageError: For undecodable, empty or oversized payloads
    """
    cleaned = _DATA_URL_PREFIX.sub("", payload.strip())
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError("Image data is not valid base64") from e

    if not raw:
        raise InvalidImageError("Image data is empty")
    if len(raw) > max_bytes:
        raise InvalidImageError(f"Image exceeds the {max_bytes // (1024 * 1024)}MB limit")
    return raw


def optimize_image(raw: bytes) -> ProcessedImage:
    """
    Normalize an image for storage.

    Applies EXIF orientation, converts to RGB and bounds the size to
    MAX_IMAGE_DIMENSIONS, then re-encodes as progressive JPEG.
    """
    try:
        with Image.open(io.BytesIO(raw)) as img:
            img = ImageOps.exif_transpose(img)
            if img.mode != "RGB":
                img = img.convert("RGB")
            if img.size[0] > MAX_IMAGE_DIMENSIONS[0] or img.size[1] > MAX_IMAGE_DIMENSIONS[1]:
                img.thumbnail(MAX_IMAGE_DIMENSIONS, Image.Resampling.LANCZOS)

            output = io.BytesIO()
            img.save(output, format="JPEG", quality=JPEG_QUALITY, optimize=True, progressive=True)
            return ProcessedImage(
                data=output.getvalue(),
                content_type="image/jpeg",
                extension=".jpg",
                width=img.size[0],
                height=img.size[1],
            )
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError("Uploaded file is not a supported image") from e


def safe_stem(file_name: str, max_length: int = 60) -> str:
    """Filename stem reduced to characters safe in an object key."""
    stem = PurePosixPath(file_name or "image").stem
    stem = re.sub(r"[^A-Za-z0-9_-]+", "-", stem).strip("-").lower()
    return (stem or "image")[:max_length]

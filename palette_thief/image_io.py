# palette_thief/image_io.py
from __future__ import annotations

import base64
import binascii
import io
from pathlib import Path
from typing import Optional, Tuple, Union
from urllib.parse import unquote_to_bytes

import numpy as np
from PIL import Image, ImageOps

from .constants import MIME_TO_PIL_FORMAT
from .core_types import PixelData

"""
Image decoding helpers: bytes / paths / data URLs -> RGBA PixelData (sRGB).
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def pixel_data_from_image(im: Image.Image) -> PixelData:
    """Snapshot a decoded image as a flat RGBA buffer; pixel_count = width*height."""
    rgba = im if im.mode == "RGBA" else im.convert("RGBA")
    arr = np.array(rgba, dtype=np.uint8)
    width, height = rgba.size
    return PixelData(buffer=arr.reshape(-1), pixel_count=width * height, channels=4)


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is None:
                return im.convert("RGBA")
            return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            return im.convert("RGBA")

    return im.convert("RGBA")


def pil_formats_for_mime(mime: str) -> Tuple[str, ...]:
    """Pillow format names for a MIME type; ValueError if unsupported."""
    key = mime.split(";", 1)[0].strip().lower()
    fmt = MIME_TO_PIL_FORMAT.get(key)
    if fmt is None:
        raise ValueError(f"Unsupported file type: {mime}")
    return (fmt,)


def decode_image_bytes(data: bytes, mime: Optional[str] = None) -> PixelData:
    """
    Decode encoded image bytes. With a MIME hint only that format is tried;
    without one Pillow sniffs the format. Decoder errors propagate.
    """
    formats = pil_formats_for_mime(mime) if mime else None
    with Image.open(io.BytesIO(data), formats=formats) as im0:
        im = _convert_to_srgb_rgba(im0)
    return pixel_data_from_image(im)


def load_image_path(path: Union[str, Path]) -> PixelData:
    """Decode an image file on disk."""
    with Image.open(Path(path)) as im0:
        im = _convert_to_srgb_rgba(im0)
    return pixel_data_from_image(im)


def parse_data_url(url: str) -> Tuple[Optional[str], bytes]:
    """
    Split 'data:[<mime>][;base64],<payload>' into (mime or None, raw bytes).
    """
    if url[:5].lower() != "data:" or "," not in url:
        raise ValueError("malformed data URL")
    header, payload = url[5:].split(",", 1)
    params = header.split(";")
    mime = params[0].strip() or None
    if "base64" in (p.strip().lower() for p in params[1:]):
        try:
            return mime, base64.b64decode(payload, validate=False)
        except binascii.Error as exc:
            raise ValueError(f"malformed base64 payload in data URL: {exc}") from exc
    return mime, unquote_to_bytes(payload)


__all__ = [
    "pixel_data_from_image",
    "pil_formats_for_mime",
    "decode_image_bytes",
    "load_image_path",
    "parse_data_url",
]

# palette_thief/constants.py
"""
Tunables used across the project.

- Option defaults and clamps (colour count, quality)
- Sampler filters (alpha cut-off, near-white suppression)
- Dominant colour cluster target
- Decoder MIME map and HTTP timeout
"""
from __future__ import annotations

from typing import Dict

# =========================
# Options
# =========================
DEFAULT_COLOUR_COUNT: int = 10
MIN_COLOUR_COUNT: int = 2
MAX_COLOUR_COUNT: int = 20

# Sampling stride; 1 visits every pixel.
DEFAULT_QUALITY: int = 10

# =========================
# Sampler filters
# =========================
# Pixels with alpha below this are skipped.
ALPHA_THRESHOLD: int = 125
# Pixels with all three channels above this are treated as background.
WHITE_THRESHOLD: int = 250

# =========================
# Quantizer
# =========================
# Dominant colour is the first entry of a palette of this size.
DOMINANT_CLUSTER_COUNT: int = 5
# Pillow palettes hold at most 256 entries.
MAX_QUANTIZER_COLOURS: int = 256

# =========================
# Loaders
# =========================
MIME_TO_PIL_FORMAT: Dict[str, str] = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/gif": "GIF",
    "image/webp": "WEBP",
    "image/bmp": "BMP",
    "image/x-ms-bmp": "BMP",
    "image/tiff": "TIFF",
}

HTTP_TIMEOUT_SECONDS: float = 30.0
CROSS_ORIGIN_HEADERS: Dict[str, str] = {"Access-Control-Allow-Origin": "*"}

__all__ = [
    "DEFAULT_COLOUR_COUNT",
    "MIN_COLOUR_COUNT",
    "MAX_COLOUR_COUNT",
    "DEFAULT_QUALITY",
    "ALPHA_THRESHOLD",
    "WHITE_THRESHOLD",
    "DOMINANT_CLUSTER_COUNT",
    "MAX_QUANTIZER_COLOURS",
    "MIME_TO_PIL_FORMAT",
    "HTTP_TIMEOUT_SECONDS",
    "CROSS_ORIGIN_HEADERS",
]

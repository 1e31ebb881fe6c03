# palette_thief/sampling.py
from __future__ import annotations

"""
Pixel sampler.

Walks a flat RGBA (or RGB) buffer at a fixed stride and keeps the opaque,
non-near-white pixels as an (N, 3) uint8 array, in scan order.
"""

import numpy as np

from .constants import ALPHA_THRESHOLD, WHITE_THRESHOLD
from .core_types import PixelBuffer, U8Samples


def _flat_u8(buffer: PixelBuffer) -> np.ndarray:
    """View any supported buffer as a 1-D uint8 array without copying when possible."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    return np.asarray(buffer, dtype=np.uint8).reshape(-1)


def sample_pixels(
    buffer: PixelBuffer, pixel_count: int, quality: int, channels: int = 4
) -> U8Samples:
    """
    Sample every `quality`-th pixel of `buffer` and filter it.

    Pixel i starts at offset channels*i. A pixel is dropped when its alpha is
    present and < 125, or when r, g and b are all > 250. An alpha byte that is
    missing (3-channel buffer, or past the end of the buffer) counts as opaque.

    Returns:
      uint8 [N,3], possibly empty.
    """
    if channels not in (3, 4):
        raise ValueError(f"channels must be 3 or 4, got {channels}")
    if quality < 1:
        raise ValueError(f"quality must be >= 1, got {quality}")
    if pixel_count <= 0:
        return np.zeros((0, 3), dtype=np.uint8)

    flat = _flat_u8(buffer)
    offsets = np.arange(0, pixel_count, quality, dtype=np.int64) * channels
    if flat.size < int(offsets[-1]) + 3:
        raise ValueError(
            f"pixel buffer too short: {flat.size} bytes for {pixel_count} pixels"
        )

    rgb = np.stack((flat[offsets], flat[offsets + 1], flat[offsets + 2]), axis=1)
    keep = ~np.all(rgb > WHITE_THRESHOLD, axis=1)

    if channels == 4:
        has_alpha = offsets + 3 < flat.size
        alpha = np.full(offsets.shape, 255, dtype=np.uint8)
        alpha[has_alpha] = flat[offsets[has_alpha] + 3]
        keep &= alpha >= ALPHA_THRESHOLD

    return np.ascontiguousarray(rgb[keep], dtype=np.uint8)


__all__ = ["sample_pixels"]

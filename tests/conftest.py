"""Shared fixtures: small synthetic images and their encoded bytes."""

from __future__ import annotations

import io
import struct
import zlib
from typing import Callable, List, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

RGBA = Tuple[int, int, int, int]


def make_rgba_image(pixels: Sequence[RGBA], width: int, height: int) -> Image.Image:
    arr = np.array(pixels, dtype=np.uint8).reshape(height, width, 4)
    return Image.fromarray(arr)


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def _png_chunk(tag: bytes, body: bytes) -> bytes:
    crc = zlib.crc32(tag + body) & 0xFFFFFFFF
    return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", crc)


def oversized_png_header(width: int = 20000, height: int = 20000) -> bytes:
    """PNG whose IHDR claims width x height; Pillow refuses it as a decompression bomb."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + _png_chunk(b"IHDR", ihdr)
        + _png_chunk(b"IDAT", zlib.compress(b""))
        + _png_chunk(b"IEND", b"")
    )


@pytest.fixture
def red_blue_image() -> Image.Image:
    """2x2 opaque: two red pixels, two blue pixels."""
    return make_rgba_image(
        [(255, 0, 0, 255), (255, 0, 0, 255), (0, 0, 255, 255), (0, 0, 255, 255)], 2, 2
    )


@pytest.fixture
def mostly_red_image() -> Image.Image:
    """2x2 opaque: three red pixels, one blue pixel."""
    return make_rgba_image(
        [(255, 0, 0, 255), (255, 0, 0, 255), (255, 0, 0, 255), (0, 0, 255, 255)], 2, 2
    )


@pytest.fixture
def white_image() -> Image.Image:
    return make_rgba_image([(255, 255, 255, 255)], 1, 1)


@pytest.fixture
def transparent_image() -> Image.Image:
    return make_rgba_image([(200, 30, 30, 0)] * 4, 2, 2)


@pytest.fixture
def png_bytes() -> Callable[[Image.Image], bytes]:
    return encode_png


@pytest.fixture
def oversized_png() -> bytes:
    return oversized_png_header()


@pytest.fixture
def stripes_image() -> Image.Image:
    """16x16 opaque image: 8 rows green, 5 rows navy, 3 rows orange."""
    rows: List[RGBA] = []
    for y in range(16):
        if y < 8:
            colour = (20, 200, 40, 255)
        elif y < 13:
            colour = (10, 20, 120, 255)
        else:
            colour = (240, 140, 10, 255)
        rows.extend([colour] * 16)
    return make_rgba_image(rows, 16, 16)

# palette_thief/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and the loader capability protocol.
"""

import os
from dataclasses import dataclass
from typing import (
    Any,
    List,
    Literal,
    Mapping,
    NamedTuple,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
)

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str
ColourType = Literal["array", "hex"]

U8Samples = NDArray[np.uint8]  # (N, 3) opaque RGB samples in scan order
Palette = List[RGBTuple]
FormattedColour = Union[RGBTuple, HexStr]
PaletteResult = Union[List[RGBTuple], List[HexStr]]

# bytes / bytearray / memoryview / list of ints / any uint8 ndarray
PixelBuffer = Union[bytes, bytearray, memoryview, Sequence[int], np.ndarray]

# Value objects


class PixelData(NamedTuple):
    """Decoded pixels handed from a loader to the pipeline."""

    buffer: PixelBuffer
    pixel_count: int
    channels: int = 4


@dataclass(frozen=True)
class TaggedBuffer:
    """Encoded image bytes with their MIME type, e.g. ('image/png', b'...')."""

    type: str
    buffer: bytes


@dataclass(frozen=True)
class PaletteOptions:
    """Per-call options. quality=None means the default stride."""

    quality: Optional[int] = None
    colour_type: ColourType = "hex"


@dataclass(frozen=True)
class ValidatedOptions:
    """Options after bounds checking: 2 <= colour_count <= 20, quality >= 1."""

    colour_count: int
    quality: int


ImageSource = Union[str, os.PathLike, TaggedBuffer, Mapping[str, Any]]

# Capability signatures


class PixelLoader(Protocol):
    """Anything that turns a source reference into PixelData (or None for 'no image')."""

    async def load(self, source: Any) -> Optional[PixelData]: ...


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "ColourType",
    "U8Samples",
    "Palette",
    "FormattedColour",
    "PaletteResult",
    "PixelBuffer",
    "ImageSource",
    # value objects
    "PixelData",
    "TaggedBuffer",
    "PaletteOptions",
    "ValidatedOptions",
    # capability signatures
    "PixelLoader",
]

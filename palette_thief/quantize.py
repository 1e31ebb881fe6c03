# palette_thief/quantize.py
from __future__ import annotations

"""
Median-cut quantizer adapter.

Clustering is Pillow's built-in median cut. The samples are packed into a
1-row RGB strip, quantized, and the used palette entries are read back
ordered by pixel count, largest cluster first.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image

from .constants import DOMINANT_CLUSTER_COUNT, MAX_QUANTIZER_COLOURS
from .core_types import Palette, RGBTuple, U8Samples


@dataclass(frozen=True)
class ColourMap:
    """Quantizer result: representative colours and their cluster sizes."""

    colours: Tuple[RGBTuple, ...]
    counts: Tuple[int, ...]

    def palette(self) -> Palette:
        """Representative colours by descending cluster population."""
        return list(self.colours)

    def __len__(self) -> int:
        return len(self.colours)


def quantize(
    points: Union[U8Samples, Sequence[RGBTuple]], max_colours: int
) -> Optional[ColourMap]:
    """
    Cluster `points` into at most `max_colours` colours.

    Returns None for an empty point set.
    """
    if not 2 <= max_colours <= MAX_QUANTIZER_COLOURS:
        raise ValueError(
            f"max_colours must be in [2, {MAX_QUANTIZER_COLOURS}], got {max_colours}"
        )
    pts = np.asarray(points, dtype=np.uint8).reshape(-1, 3)
    if pts.shape[0] == 0:
        return None

    strip = Image.fromarray(np.ascontiguousarray(pts.reshape(1, -1, 3)))
    quantized = strip.quantize(colors=max_colours, method=Image.Quantize.MEDIANCUT)

    used = quantized.getcolors(maxcolors=MAX_QUANTIZER_COLOURS) or []
    flat_palette = quantized.getpalette() or []
    # (count, index); ties keep palette order
    used.sort(key=lambda item: (-item[0], item[1]))

    colours = tuple(
        (
            int(flat_palette[3 * idx]),
            int(flat_palette[3 * idx + 1]),
            int(flat_palette[3 * idx + 2]),
        )
        for _count, idx in used
    )
    counts = tuple(int(count) for count, _idx in used)
    return ColourMap(colours=colours, counts=counts)


def build_palette(samples: U8Samples, colour_count: int) -> Palette:
    """Palette of at most colour_count entries; [] when there is nothing to cluster."""
    colour_map = quantize(samples, colour_count)
    if colour_map is None:
        return []
    return colour_map.palette()[:colour_count]


def dominant_colour(samples: U8Samples) -> Optional[RGBTuple]:
    """First entry of a fixed 5-cluster palette, or None."""
    palette = build_palette(samples, DOMINANT_CLUSTER_COUNT)
    return palette[0] if palette else None


__all__ = ["ColourMap", "quantize", "build_palette", "dominant_colour"]

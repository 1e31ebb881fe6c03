# palette_thief/pipeline.py
from __future__ import annotations

"""
Pixel-to-palette pipeline.

  validate options -> sample pixels -> median-cut quantize -> format

The synchronous half works on PixelData already in memory. The async half
takes a loader capability, awaits exactly one acquisition, then runs the
synchronous half. A loader returning None means "no image" and yields an
empty palette / None colour.
"""

from typing import Any, Mapping, Optional, Union

from .colour_format import format_colour, format_palette
from .constants import DEFAULT_COLOUR_COUNT, DOMINANT_CLUSTER_COUNT
from .core_types import (
    FormattedColour,
    Palette,
    PaletteOptions,
    PaletteResult,
    PixelData,
    PixelLoader,
    RGBTuple,
    ValidatedOptions,
)
from .options import coerce_options, validate_options
from .quantize import build_palette, dominant_colour
from .sampling import sample_pixels

OptionsArg = Union[PaletteOptions, Mapping[str, Any], None]


def run_palette(pixels: PixelData, options: ValidatedOptions) -> Palette:
    """Sample and quantize; returns colours in 'array' form."""
    samples = sample_pixels(
        pixels.buffer, pixels.pixel_count, options.quality, channels=pixels.channels
    )
    return build_palette(samples, options.colour_count)


def run_colour(pixels: PixelData, options: ValidatedOptions) -> Optional[RGBTuple]:
    """Dominant colour in 'array' form. options.colour_count is not used."""
    samples = sample_pixels(
        pixels.buffer, pixels.pixel_count, options.quality, channels=pixels.channels
    )
    return dominant_colour(samples)


def palette_from_pixels(
    pixels: PixelData,
    colour_count: Any = DEFAULT_COLOUR_COUNT,
    options: OptionsArg = None,
) -> PaletteResult:
    """Palette of decoded pixels, formatted per options.colour_type (default 'hex')."""
    opts = coerce_options(options)
    validated = validate_options(colour_count, opts.quality)
    return format_palette(run_palette(pixels, validated), opts.colour_type)


def colour_from_pixels(
    pixels: PixelData, options: OptionsArg = None
) -> Optional[FormattedColour]:
    """Dominant colour of decoded pixels, or None when nothing survives sampling."""
    opts = coerce_options(options)
    validated = validate_options(DOMINANT_CLUSTER_COUNT, opts.quality)
    return format_colour(run_colour(pixels, validated), opts.colour_type)


async def extract_palette(
    loader: PixelLoader,
    source: Any,
    colour_count: Any = DEFAULT_COLOUR_COUNT,
    options: OptionsArg = None,
) -> PaletteResult:
    """
    Load `source` with `loader` and return its palette.

    Options are validated before the load, so a bad colour count never
    triggers any I/O. Loader exceptions are not caught here.
    """
    opts = coerce_options(options)
    validated = validate_options(colour_count, opts.quality)
    pixels = await loader.load(source)
    if pixels is None:
        return []
    return format_palette(run_palette(pixels, validated), opts.colour_type)


async def extract_colour(
    loader: PixelLoader, source: Any, options: OptionsArg = None
) -> Optional[FormattedColour]:
    """Load `source` with `loader` and return its dominant colour (or None)."""
    opts = coerce_options(options)
    validated = validate_options(DOMINANT_CLUSTER_COUNT, opts.quality)
    pixels = await loader.load(source)
    if pixels is None:
        return None
    return format_colour(run_colour(pixels, validated), opts.colour_type)


__all__ = [
    "run_palette",
    "run_colour",
    "palette_from_pixels",
    "colour_from_pixels",
    "extract_palette",
    "extract_colour",
]

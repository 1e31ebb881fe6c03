# palette_thief/__init__.py
"""
palette_thief package.

Purpose:
  Extract a representative colour palette, and a dominant colour, from an image
  by sampling its pixels and clustering them with median cut. See
  extract_palette.py for the CLI.

Public API:
  CanvasColourThief  : palette / colour from decoded Pillow images, or URLs (never raises on fetch).
  DecoderColourThief : async palette / colour from paths, URLs, data URLs, tagged buffers.
  pipeline           : palette_from_pixels, colour_from_pixels, extract_palette, extract_colour.
  options            : validate_options, InvalidColourCountError.
  sampling           : sample_pixels.
  quantize           : quantize, build_palette, dominant_colour.
  colour_format      : rgb_to_hex, hex_to_rgb.
  core_types         : shared aliases and value objects (PixelData, PaletteOptions, TaggedBuffer).

Quick start:
  from PIL import Image
  from palette_thief import CanvasColourThief
  CanvasColourThief().get_palette(Image.open("photo.jpg"), 6)
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import core_types
from . import constants
from . import options
from . import sampling
from . import quantize
from . import colour_format
from . import pipeline
from . import utils
from . import loaders

from .core_types import PaletteOptions, PixelData, TaggedBuffer  # noqa: E402,F401
from .options import InvalidColourCountError, validate_options  # noqa: E402,F401
from .colour_format import hex_to_rgb, rgb_to_hex  # noqa: E402,F401
from .pipeline import (  # noqa: E402,F401
    colour_from_pixels,
    extract_colour,
    extract_palette,
    palette_from_pixels,
)
from .thief import CanvasColourThief, DecoderColourThief  # noqa: E402,F401

__all__ = [
    "__version__",
    "core_types",
    "constants",
    "options",
    "sampling",
    "quantize",
    "colour_format",
    "pipeline",
    "utils",
    "loaders",
    "PaletteOptions",
    "PixelData",
    "TaggedBuffer",
    "InvalidColourCountError",
    "validate_options",
    "hex_to_rgb",
    "rgb_to_hex",
    "palette_from_pixels",
    "colour_from_pixels",
    "extract_palette",
    "extract_colour",
    "CanvasColourThief",
    "DecoderColourThief",
]

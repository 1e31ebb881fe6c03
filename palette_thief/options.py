# palette_thief/options.py
from __future__ import annotations

from numbers import Integral
from typing import Any, Mapping, Optional, Union

from .constants import (
    DEFAULT_COLOUR_COUNT,
    DEFAULT_QUALITY,
    MAX_COLOUR_COUNT,
    MIN_COLOUR_COUNT,
)
from .core_types import ColourType, PaletteOptions, ValidatedOptions

"""
Option validation: colour count clamping, quality defaulting, option coercion.
"""

_COLOUR_TYPE_KEYS = ("colour_type", "color_type", "colorType")


class InvalidColourCountError(ValueError):
    """Raised when a palette of exactly one colour is requested."""


def _as_integer(value: Any) -> Optional[int]:
    """Return value as int when it is integral (bools excluded), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_options(colour_count: Any = None, quality: Any = None) -> ValidatedOptions:
    """
    Normalise the two tunables.

    colour_count: missing / non-integer -> 10; exactly 1 -> InvalidColourCountError;
                  anything else clamped into [2, 20].
    quality     : missing / non-integer / < 1 -> 10.
    """
    count = _as_integer(colour_count)
    if count is None:
        count = DEFAULT_COLOUR_COUNT
    elif count == 1:
        raise InvalidColourCountError(
            "colour_count should be between 2 and 20. "
            "To get one colour, call get_colour() instead of get_palette()"
        )
    else:
        count = min(max(count, MIN_COLOUR_COUNT), MAX_COLOUR_COUNT)

    stride = _as_integer(quality)
    if stride is None or stride < 1:
        stride = DEFAULT_QUALITY

    return ValidatedOptions(colour_count=count, quality=stride)


def check_colour_type(colour_type: Any) -> ColourType:
    if colour_type not in ("array", "hex"):
        raise ValueError(f"colour_type must be 'array' or 'hex', got {colour_type!r}")
    return colour_type


def coerce_options(
    options: Union[PaletteOptions, Mapping[str, Any], None],
) -> PaletteOptions:
    """Accept a PaletteOptions, a plain mapping, or None; return PaletteOptions."""
    if options is None:
        return PaletteOptions()
    if isinstance(options, PaletteOptions):
        check_colour_type(options.colour_type)
        return options
    colour_type: Any = "hex"
    for key in _COLOUR_TYPE_KEYS:
        if options.get(key) is not None:
            colour_type = options[key]
            break
    return PaletteOptions(
        quality=options.get("quality"),
        colour_type=check_colour_type(colour_type),
    )


__all__ = [
    "InvalidColourCountError",
    "validate_options",
    "check_colour_type",
    "coerce_options",
]

# palette_thief/colour_format.py
from __future__ import annotations

from typing import Iterable, List, Optional, Union

from .core_types import ColourType, FormattedColour, HexStr, RGBTuple


def rgb_to_hex(rgb: Iterable[int]) -> HexStr:
    """RGB triple to lowercase hex string '#rrggbb'."""
    r, g, b = list(rgb)
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def format_colour(
    colour: Optional[RGBTuple], colour_type: ColourType
) -> Optional[FormattedColour]:
    if colour is None:
        return None
    if colour_type == "hex":
        return rgb_to_hex(colour)
    return colour


def format_palette(
    palette: List[RGBTuple], colour_type: ColourType
) -> Union[List[RGBTuple], List[HexStr]]:
    if colour_type == "hex":
        return [rgb_to_hex(c) for c in palette]
    return list(palette)


__all__ = ["rgb_to_hex", "hex_to_rgb", "format_colour", "format_palette"]

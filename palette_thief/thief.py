# palette_thief/thief.py
from __future__ import annotations

"""
Public entry points for both platforms.

Each facade owns a loader and delegates to the shared pipeline; neither
subclasses anything. Defaults: colour_count=10, quality=10, colour_type='hex'.

  CanvasColourThief   get_palette / get_colour on a decoded Pillow image (sync)
                      get_palette_async / get_colour_async on a URL; fetch or
                      decode failures give [] / None
  DecoderColourThief  async get_palette / get_colour on a path, URL, data URL
                      or tagged buffer; failures raise
"""

from typing import Any, Optional

import httpx
from PIL import Image

from .constants import DEFAULT_COLOUR_COUNT
from .core_types import FormattedColour, ImageSource, PaletteResult
from .loaders import CanvasLoader, DecoderLoader
from .pipeline import (
    OptionsArg,
    colour_from_pixels,
    extract_colour,
    extract_palette,
    palette_from_pixels,
)


class CanvasColourThief:
    def __init__(
        self,
        cross_origin: bool = False,
        client: Optional[httpx.AsyncClient] = None,
        debug: bool = False,
    ) -> None:
        self.loader = CanvasLoader(cross_origin=cross_origin, client=client, debug=debug)

    def get_palette(
        self,
        image: Image.Image,
        colour_count: Any = DEFAULT_COLOUR_COUNT,
        options: OptionsArg = None,
    ) -> PaletteResult:
        return palette_from_pixels(self.loader.acquire(image), colour_count, options)

    def get_colour(
        self, image: Image.Image, options: OptionsArg = None
    ) -> Optional[FormattedColour]:
        return colour_from_pixels(self.loader.acquire(image), options)

    async def get_palette_async(
        self,
        url: str,
        colour_count: Any = DEFAULT_COLOUR_COUNT,
        options: OptionsArg = None,
    ) -> PaletteResult:
        return await extract_palette(self.loader, url, colour_count, options)

    async def get_colour_async(
        self, url: str, options: OptionsArg = None
    ) -> Optional[FormattedColour]:
        return await extract_colour(self.loader, url, options)


class DecoderColourThief:
    def __init__(
        self, client: Optional[httpx.AsyncClient] = None, debug: bool = False
    ) -> None:
        self.loader = DecoderLoader(client=client, debug=debug)

    async def get_palette(
        self,
        source: ImageSource,
        colour_count: Any = DEFAULT_COLOUR_COUNT,
        options: OptionsArg = None,
    ) -> PaletteResult:
        return await extract_palette(self.loader, source, colour_count, options)

    async def get_colour(
        self, source: ImageSource, options: OptionsArg = None
    ) -> Optional[FormattedColour]:
        return await extract_colour(self.loader, source, options)


__all__ = ["CanvasColourThief", "DecoderColourThief"]

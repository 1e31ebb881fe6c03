# palette_thief/loaders/canvas.py
from __future__ import annotations

"""
Canvas loader.

Snapshots an already-decoded Pillow image onto an RGBA surface. The async
path fetches a URL first; any fetch or decode failure resolves to None so
callers get an empty palette instead of an exception.
"""

import asyncio
import io
from typing import Optional

import httpx
import numpy as np
from PIL import Image, UnidentifiedImageError

from ..constants import CROSS_ORIGIN_HEADERS, HTTP_TIMEOUT_SECONDS
from ..core_types import PixelData
from ..utils import debug_log


class CanvasLoader:
    """Surface snapshots of decoded images; URL fetches swallow failures."""

    def __init__(
        self,
        cross_origin: bool = False,
        client: Optional[httpx.AsyncClient] = None,
        debug: bool = False,
    ) -> None:
        self.cross_origin = cross_origin
        self.debug = debug
        self._client = client

    def acquire(self, image: Image.Image) -> PixelData:
        """Draw `image` onto a transparent RGBA surface of its size and read it back."""
        surface = Image.new("RGBA", image.size, (0, 0, 0, 0))
        surface.paste(image.convert("RGBA"), (0, 0))
        arr = np.array(surface, dtype=np.uint8)
        width, height = surface.size
        return PixelData(buffer=arr.reshape(-1), pixel_count=width * height)

    async def _get(self, url: str) -> httpx.Response:
        headers = dict(CROSS_ORIGIN_HEADERS) if self.cross_origin else None
        if self._client is not None:
            return await self._client.get(url, headers=headers)
        async with httpx.AsyncClient(
            timeout=HTTP_TIMEOUT_SECONDS, follow_redirects=True
        ) as client:
            return await client.get(url, headers=headers)

    async def fetch(self, url: str) -> Optional[Image.Image]:
        """GET `url` and decode the body; None on any network or decode failure."""
        try:
            response = await self._get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            if self.debug:
                debug_log(f"fetch failed for {url}: {exc}")
            return None
        if not response.is_success:
            if self.debug:
                debug_log(f"fetch {url} -> HTTP {response.status_code}")
            return None
        try:
            return await asyncio.to_thread(_decode, response.content)
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            ValueError,
        ) as exc:
            if self.debug:
                debug_log(f"decode failed for {url}: {exc}")
            return None

    async def load(self, url: str) -> Optional[PixelData]:
        image = await self.fetch(url)
        if image is None:
            return None
        return self.acquire(image)


def _decode(data: bytes) -> Image.Image:
    with Image.open(io.BytesIO(data)) as im:
        im.load()
        return im.copy()


__all__ = ["CanvasLoader"]

# palette_thief/loaders/decoder.py
from __future__ import annotations

"""
Decoder loader.

Accepts a file path, an http(s) URL, a data URL, or a tagged in-memory
buffer, and decodes it with Pillow off the event loop. Unlike the canvas
loader, every failure propagates: httpx errors for the network,
FileNotFoundError for paths, UnidentifiedImageError for undecodable bytes,
ValueError for unsupported MIME types.
"""

import asyncio
import os
from typing import Any, Mapping, Optional

import httpx

from ..constants import HTTP_TIMEOUT_SECONDS
from ..core_types import ImageSource, PixelData, TaggedBuffer
from ..image_io import decode_image_bytes, load_image_path, parse_data_url
from ..utils import debug_log, key_value_pairs_to_string


def _is_data_url(text: str) -> bool:
    return text[:5].lower() == "data:"


def _is_http_url(text: str) -> bool:
    lowered = text.lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def as_tagged_buffer(source: Any) -> Optional[TaggedBuffer]:
    """TaggedBuffer for TaggedBuffer / {'type', 'buffer'} mappings, else None."""
    if isinstance(source, TaggedBuffer):
        return source
    if isinstance(source, Mapping) and "type" in source and "buffer" in source:
        return TaggedBuffer(type=str(source["type"]), buffer=bytes(source["buffer"]))
    return None


class DecoderLoader:
    """Decodes image sources into PixelData; raises on any failure."""

    def __init__(
        self, client: Optional[httpx.AsyncClient] = None, debug: bool = False
    ) -> None:
        self.debug = debug
        self._client = client

    async def _download(self, url: str) -> httpx.Response:
        if self._client is not None:
            response = await self._client.get(url)
        else:
            async with httpx.AsyncClient(
                timeout=HTTP_TIMEOUT_SECONDS, follow_redirects=True
            ) as client:
                response = await client.get(url)
        response.raise_for_status()
        return response

    async def load(self, source: ImageSource) -> PixelData:
        tagged = as_tagged_buffer(source)
        if tagged is not None:
            pixels = await asyncio.to_thread(
                decode_image_bytes, tagged.buffer, tagged.type
            )
            origin = f"buffer ({tagged.type})"
        elif isinstance(source, (str, os.PathLike)):
            text = os.fspath(source)
            if isinstance(text, str) and _is_data_url(text):
                mime, data = parse_data_url(text)
                pixels = await asyncio.to_thread(decode_image_bytes, data, mime)
                origin = f"data URL ({mime or 'sniffed'})"
            elif isinstance(text, str) and _is_http_url(text):
                response = await self._download(text)
                mime = response.headers.get("content-type")
                # servers often send octet-stream; let Pillow sniff those
                hint = mime if mime and mime.lower().startswith("image/") else None
                pixels = await asyncio.to_thread(
                    decode_image_bytes, response.content, hint
                )
                origin = text
            else:
                pixels = await asyncio.to_thread(load_image_path, text)
                origin = str(text)
        else:
            raise TypeError(
                "source must be a path, URL, TaggedBuffer or {'type', 'buffer'} mapping, "
                f"got {type(source).__name__}"
            )

        if self.debug:
            debug_log(
                key_value_pairs_to_string(
                    [("Decoded", origin), ("Pixels", int(pixels.pixel_count))]
                )
            )
        return pixels


__all__ = ["DecoderLoader", "as_tagged_buffer"]

#!/usr/bin/env python3
"""
extract_palette.py
Print the colour palette and dominant colour of one or more images.

Usage:
  python extract_palette.py SRC --colours N --quality Q --format [hex|array] --dominant --jobs J --debug

Input:
  SRC is a Pillow-readable image file, a folder of images, or an http(s)/data URL.

Output:
  One block per image: palette entries (largest cluster first), the dominant
  colour, and the time taken. Fully transparent or near-white images print an
  empty palette and '-' for the dominant colour.

Notes:
  Sampling / clustering live in palette_thief.pipeline; decoding in
  palette_thief.loaders.decoder. Folder images are decoded concurrently, up to
  --jobs at a time, and reported in name order.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import httpx
from PIL import Image

from palette_thief.colour_format import format_colour, format_palette
from palette_thief.constants import DEFAULT_COLOUR_COUNT, DEFAULT_QUALITY
from palette_thief.core_types import Palette, RGBTuple, ValidatedOptions
from palette_thief.loaders import DecoderLoader
from palette_thief.options import InvalidColourCountError, validate_options
from palette_thief.pipeline import run_colour, run_palette
from palette_thief.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
)

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp", ".tif", ".tiff"}


# CLI args


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: image path, folder, or URL
        colours: requested palette size (clamped to 2..20; 1 is rejected)
        quality: sampling stride (1 = every pixel)
        format: "hex" | "array"
        dominant: only report the dominant colour
        jobs: images decoded concurrently in folder mode
        debug: bool for verbose details
    """
    parser = argparse.ArgumentParser(
        prog="extract_palette",
        description="Print the median-cut colour palette of image(s).",
    )
    parser.add_argument("src", help="Input image, folder, or URL")
    parser.add_argument(
        "--colours",
        "--colors",
        dest="colours",
        type=int,
        default=DEFAULT_COLOUR_COUNT,
        help="Palette size (2..20).",
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=DEFAULT_QUALITY,
        help="Sample every Nth pixel. 1 is slowest and most thorough.",
    )
    parser.add_argument(
        "--format",
        choices=["hex", "array"],
        default="hex",
        help="Colour representation.",
    )
    parser.add_argument(
        "--dominant", action="store_true", help="Only print the dominant colour"
    )
    parser.add_argument("--jobs", type=int, default=2, help="Images decoded in parallel")
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    return parser.parse_args(argv)


# Per-source processing


@dataclass
class _Outcome:
    label: str
    palette: Optional[Palette]
    colour: Optional[RGBTuple]
    pixel_count: int
    seconds: float
    failure: Optional[str] = None


async def _extract_one(
    loader: DecoderLoader,
    label: str,
    source: str,
    args: argparse.Namespace,
    validated: ValidatedOptions,
    gate: asyncio.Semaphore,
) -> _Outcome:
    """Decode one source and run the pipeline; decode failures become an outcome."""
    async with gate:
        t_start = time.perf_counter()
        try:
            pixels = await loader.load(source)
        except (
            OSError,
            ValueError,
            Image.DecompressionBombError,
            httpx.HTTPError,
        ) as exc:
            return _Outcome(label, None, None, 0, time.perf_counter() - t_start, str(exc))
        t_loaded = time.perf_counter()

        palette = None if args.dominant else run_palette(pixels, validated)
        colour = run_colour(pixels, validated)
        t_done = time.perf_counter()

    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Source", label),
                    ("Load", format_seconds_compact(t_loaded - t_start)),
                    ("Quantize", format_seconds_compact(t_done - t_loaded)),
                ]
            )
        )
    return _Outcome(label, palette, colour, int(pixels.pixel_count), t_done - t_start)


def _report(outcome: _Outcome, args: argparse.Namespace) -> None:
    print_banner(outcome.label)
    if outcome.failure is not None:
        error(f"{outcome.label}: {outcome.failure}")
        return

    if outcome.palette is not None:
        shown = format_palette(outcome.palette, args.format)
        log(f"Palette ({len(shown)} colours):")
        for entry in shown:
            log(f"  {entry}")

    dominant = format_colour(outcome.colour, args.format)
    log(f"Dominant: {dominant if dominant is not None else '-'}")
    log(f"Pixels: {outcome.pixel_count:,}")
    log(f"Total time {format_total_duration_compact(outcome.seconds)}")


def _collect_sources(src: str, debug: bool) -> Optional[List[Tuple[str, str]]]:
    """Expand SRC into (label, source) pairs; None when a local SRC does not exist."""
    lowered = src.lower()
    if lowered.startswith("data:"):
        return [("data URL", src)]
    if lowered.startswith(("http://", "https://")):
        return [(src, src)]
    path = Path(src)
    if not path.exists():
        return None
    if not path.is_dir():
        return [(path.name, str(path))]
    all_entries = list(path.iterdir())
    files = [p for p in all_entries if p.is_file() and p.suffix.lower() in IMAGE_EXTS]
    files.sort(key=lambda p: p.name.lower())
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [("Folder entries", len(all_entries)), ("Images", len(files))]
            )
        )
    return [(p.name, str(p)) for p in files]


async def _run(
    sources: List[Tuple[str, str]], args: argparse.Namespace, validated: ValidatedOptions
) -> List[_Outcome]:
    loader = DecoderLoader(debug=args.debug)
    gate = asyncio.Semaphore(max(1, args.jobs))
    tasks = [
        _extract_one(loader, label, source, args, validated, gate)
        for label, source in sources
    ]
    return list(await asyncio.gather(*tasks))


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Returns 0 on success, 1 when an argument is invalid or any image failed,
    2 when SRC does not exist.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    try:
        validated = validate_options(args.colours, args.quality)
    except InvalidColourCountError as exc:
        error(str(exc))
        return 1

    print_config_line(
        "run",
        [
            ("Colours", validated.colour_count),
            ("Quality", validated.quality),
            ("Format", args.format),
            ("Jobs", args.jobs),
        ],
        debug=False,
    )

    sources = _collect_sources(args.src, args.debug)
    if sources is None:
        error(f"not found: {args.src}")
        return 2

    outcomes = asyncio.run(_run(sources, args, validated))
    for outcome in outcomes:
        _report(outcome, args)
    return 1 if any(o.failure is not None for o in outcomes) else 0


if __name__ == "__main__":
    sys.exit(main())

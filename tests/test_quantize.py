"""Tests for the median-cut quantizer adapter."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import pytest

import palette_thief.quantize as quantize_mod
from palette_thief.quantize import ColourMap, build_palette, dominant_colour, quantize


def _points(*groups: Tuple[Tuple[int, int, int], int]) -> np.ndarray:
    rows: List[Tuple[int, int, int]] = []
    for colour, count in groups:
        rows.extend([colour] * count)
    return np.array(rows, dtype=np.uint8)


def test_empty_input_gives_no_colour_map() -> None:
    assert quantize(np.zeros((0, 3), dtype=np.uint8), 5) is None
    assert quantize([], 5) is None


@pytest.mark.parametrize("max_colours", [0, 1, 257])
def test_out_of_range_cluster_target_raises(max_colours: int) -> None:
    with pytest.raises(ValueError):
        quantize(_points(((1, 2, 3), 4)), max_colours)


def test_palette_is_ordered_by_cluster_population() -> None:
    points = _points(((0, 0, 230), 20), ((230, 0, 0), 50), ((0, 230, 0), 30))
    colour_map = quantize(points, 3)
    assert isinstance(colour_map, ColourMap)
    assert len(colour_map) == 3
    assert list(colour_map.counts) == [50, 30, 20]
    dominant_channels = [int(np.argmax(c)) for c in colour_map.palette()]
    assert dominant_channels == [0, 1, 2]


def test_identical_points_collapse_to_one_colour() -> None:
    colour_map = quantize(_points(((12, 34, 56), 10)), 4)
    assert colour_map is not None
    assert colour_map.palette() == [(12, 34, 56)]
    assert colour_map.counts == (10,)


def test_palette_entries_are_plain_int_triples() -> None:
    palette = build_palette(_points(((200, 10, 10), 5), ((10, 10, 200), 5)), 2)
    for colour in palette:
        assert isinstance(colour, tuple) and len(colour) == 3
        assert all(type(ch) is int and 0 <= ch <= 255 for ch in colour)


@pytest.mark.parametrize("colour_count", [2, 3, 7, 12, 20])
def test_palette_never_exceeds_requested_size(colour_count: int) -> None:
    rng = np.random.default_rng(7)
    samples = rng.integers(0, 250, size=(600, 3), dtype=np.uint8)
    palette = build_palette(samples, colour_count)
    assert 1 <= len(palette) <= colour_count


def test_build_palette_of_empty_samples_is_empty() -> None:
    assert build_palette(np.zeros((0, 3), dtype=np.uint8), 8) == []


def test_dominant_colour_is_largest_cluster() -> None:
    samples = _points(((250, 0, 0), 3), ((0, 0, 250), 1))
    assert dominant_colour(samples) == (250, 0, 0)


def test_dominant_colour_of_nothing_is_none() -> None:
    assert dominant_colour(np.zeros((0, 3), dtype=np.uint8)) is None


def test_dominant_colour_always_uses_five_clusters(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen: List[int] = []
    real = quantize_mod.quantize

    def spy(points, max_colours):
        seen.append(max_colours)
        return real(points, max_colours)

    monkeypatch.setattr(quantize_mod, "quantize", spy)
    rng = np.random.default_rng(3)
    samples = rng.integers(0, 250, size=(300, 3), dtype=np.uint8)

    build_palette(samples, 16)
    colour = dominant_colour(samples)

    assert seen == [16, 5]
    assert colour == real(samples, 5).palette()[0]

"""Tests for option validation and coercion."""

from __future__ import annotations

import numpy as np
import pytest

from palette_thief.core_types import PaletteOptions
from palette_thief.options import (
    InvalidColourCountError,
    coerce_options,
    validate_options,
)


def test_defaults_when_absent() -> None:
    opts = validate_options()
    assert (opts.colour_count, opts.quality) == (10, 10)


def test_colour_count_of_one_points_to_get_colour() -> None:
    with pytest.raises(InvalidColourCountError, match="get_colour"):
        validate_options(1, 10)


def test_invalid_colour_count_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_options(1.0)


@pytest.mark.parametrize(
    "raw, expected",
    [(0, 2), (-7, 2), (2, 2), (8, 8), (20, 20), (21, 20), (500, 20)],
)
def test_colour_count_is_clamped(raw: int, expected: int) -> None:
    assert validate_options(raw).colour_count == expected


@pytest.mark.parametrize("raw", ["5", 4.5, None, True, [3]])
def test_non_integer_colour_count_defaults(raw: object) -> None:
    assert validate_options(raw).colour_count == 10


def test_integral_float_and_numpy_ints_count_as_integers() -> None:
    assert validate_options(6.0).colour_count == 6
    assert validate_options(np.int64(4)).colour_count == 4


@pytest.mark.parametrize("raw, expected", [(1, 1), (3, 3), (1000, 1000)])
def test_quality_kept_when_valid(raw: int, expected: int) -> None:
    assert validate_options(5, raw).quality == expected


@pytest.mark.parametrize("raw", [0, -3, 2.5, "2", None, False])
def test_quality_defaults_when_invalid(raw: object) -> None:
    assert validate_options(5, raw).quality == 10


def test_coerce_options_accepts_dataclass_mapping_and_none() -> None:
    assert coerce_options(None) == PaletteOptions()
    given = PaletteOptions(quality=3, colour_type="array")
    assert coerce_options(given) is given
    assert coerce_options({"quality": 4, "colorType": "array"}) == PaletteOptions(
        quality=4, colour_type="array"
    )
    assert coerce_options({"color_type": "hex"}).colour_type == "hex"


def test_coerce_options_rejects_unknown_colour_type() -> None:
    with pytest.raises(ValueError, match="colour_type"):
        coerce_options({"colour_type": "rgb"})
    with pytest.raises(ValueError):
        coerce_options(PaletteOptions(colour_type="css"))  # type: ignore[arg-type]

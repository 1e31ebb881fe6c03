"""Tests for the print-based logging helpers."""

from __future__ import annotations

import pytest

from palette_thief.utils import (
    format_number_compact,
    format_seconds_compact,
    key_value_pairs_to_string,
    print_config_line,
)


def test_key_value_pairs_format_numbers_compactly() -> None:
    line = key_value_pairs_to_string([("Pixels", 12345), ("Ratio", 0.5), ("Format", "hex")])
    assert line == "Pixels: 12,345  Ratio: 0.5  Format: hex"


def test_format_number_compact_passthrough() -> None:
    assert format_number_compact("a.png") == "a.png"
    assert format_number_compact(2.0) == "2"


def test_format_seconds_compact_units() -> None:
    assert format_seconds_compact(0.25) == "250.0ms"
    assert format_seconds_compact(2.5) == "2.500s"
    assert format_seconds_compact(125.0) == "2m 5.0s"


def test_config_line_routes_by_debug(capsys: pytest.CaptureFixture[str]) -> None:
    print_config_line("run", [("Colours", 10)], debug=False)
    print_config_line("run", [("Jobs", 2)], debug=True)
    out = capsys.readouterr().out.splitlines()
    assert out == ["[run] Colours: 10", "[debug] [run] Jobs: 2"]

"""
Tests for the ASCII formatter.

Usage:
    pytest tests/test_formatter.py
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick import matchstick_formatter
from matchstick.formatter import GLYPHS, format_lines


def test_single_digit():
    assert matchstick_formatter("8") == " _ \n|_|\n|_|"


def test_equation():
    assert format_lines("1+1=2") == [
        "             _ ",
        "  |     |--- _|",
        "  | +   |---|_ ",
    ]


def test_multiplication_sign():
    assert matchstick_formatter("2*3=6") == matchstick_formatter("2x3=6")


def test_unknown_characters_are_blank():
    assert format_lines("?") == ["   ", "   ", "   "]


def test_every_row_is_three_columns_per_character():
    equation = "0123456789+-x/="
    for row in format_lines(equation):
        assert len(row) == 3 * len(equation)
    assert set(GLYPHS) >= set(equation)


def test_empty_equation():
    assert matchstick_formatter("") == "\n\n"


def test_spaces_render_as_blank_blocks():
    lines = format_lines("1 1")
    assert lines == ["         ", "  |     |", "  |     |"]
    for row in lines:
        assert len(row) == 9


def test_tab_renders_as_blank_block():
    assert format_lines("1\t1") == format_lines("1 1")


def test_multiplication_cross_sign():
    assert matchstick_formatter("2×3=6") == matchstick_formatter("2x3=6")

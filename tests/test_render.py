"""
Tests for the board image renderer.

Usage:
    pytest tests/test_render.py
"""

import sys
from pathlib import Path

import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick import solve
from matchstick.render import (
    CELL_GAP,
    CELL_HEIGHT,
    CELL_WIDTH,
    LABEL_HEIGHT,
    MARGIN,
    render_board_image,
    save_solution_image,
)
from matchstick.solver import BoardState, Move

RED = (211, 47, 47)
GREEN = (76, 175, 80)


def colors(image):
    return {color for _, color in image.getcolors(maxcolors=1 << 16)}


def test_image_size():
    image = render_board_image("5+7=2")
    assert image.mode == "RGB"
    assert image.size == (2 * MARGIN + 5 * CELL_WIDTH + 4 * CELL_GAP, 2 * MARGIN + CELL_HEIGHT)


def test_accepts_board_state():
    image = render_board_image(BoardState.from_equation("1=1"), label="1=1")
    assert image.size[1] == 2 * MARGIN + CELL_HEIGHT + LABEL_HEIGHT


def test_plain_board_has_no_highlight():
    found = colors(render_board_image("5+7=2"))
    assert RED not in found
    assert GREEN not in found


def test_moves_are_highlighted():
    move = Move(from_position=1, from_bit=8, to_position=0, to_bit=1)
    image = render_board_image("5+7=2", [move], "before")
    found = colors(image)
    assert RED in found
    assert GREEN in found
    # Middle of the vertical bar of the plus sign
    x = MARGIN + CELL_WIDTH + CELL_GAP + CELL_WIDTH // 2
    assert image.getpixel((x, MARGIN + CELL_HEIGHT * 2 // 5)) == RED


def test_invalid_highlight():
    with pytest.raises(ValueError):
        render_board_image("1=1", highlight="during")


def test_save_solution_image(tmp_path):
    solution = next(s for s in solve("5+7=2") if s.equation == "9-7=2")
    path = save_solution_image("5+7=2", solution, tmp_path / "out" / "solution.png")
    assert path.exists()
    with Image.open(path) as image:
        width = 2 * MARGIN + 5 * CELL_WIDTH + 4 * CELL_GAP
        height = 2 * (2 * MARGIN + CELL_HEIGHT + LABEL_HEIGHT)
        assert image.size == (width, height)


def test_save_prepended_solution_image(tmp_path):
    solution = next(
        s for s in solve("1=1+2", allow_prepend=True) if s.equation == "-1=1-2"
    )
    path = save_solution_image("1=1+2", solution, tmp_path / "prepend.png")
    with Image.open(path) as image:
        assert image.size[0] == 2 * MARGIN + 6 * CELL_WIDTH + 5 * CELL_GAP

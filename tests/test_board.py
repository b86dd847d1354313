"""
Tests for the board codec and upside-down rotation.

Usage:
    pytest tests/test_board.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick.solver.board import (
    BoardState,
    board_to_equation,
    equation_to_board,
    flip_bits,
    flip_board,
    flip_slots,
)
from matchstick.solver.move import Move, diff_boards
from matchstick.solver.slots import Slot, character_to_slots


@pytest.mark.parametrize("equation", ["5+7=2", "3x9=5", "12/4=3", "0-8=-8", "88=88"])
def test_equation_round_trip(equation):
    assert board_to_equation(equation_to_board(equation)) == equation


def test_bits_round_trip():
    board = BoardState.from_equation("6+4=4")
    assert BoardState.from_board(board.to_board()) == board
    assert board.to_equation() == "6+4=4"
    assert len(board) == 5


def test_empty_board():
    board = BoardState.from_equation("")
    assert board.bits == ()
    assert board.to_equation() == ""
    assert board.flipped() == BoardState(bits=())


def test_unrecognizable_board():
    assert board_to_equation((Slot.A,)) is None
    assert BoardState(bits=(int(Slot.A | Slot.G),)).to_equation() is None


def test_board_state_is_hashable():
    first = BoardState.from_equation("1+1=3")
    second = BoardState.from_equation("1+1=3")
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_count_matchsticks():
    assert BoardState.from_equation("1+1=2").count_matchsticks() == 2 + 2 + 2 + 2 + 5


@pytest.mark.parametrize("char,expected", [
    ("6", "9"), ("9", "6"), ("0", "0"), ("8", "8"), ("1", "1"),
    ("2", "2"), ("5", "5"), ("+", "+"), ("-", "-"), ("=", "="), ("x", "x"),
])
def test_flip_single_characters(char, expected):
    rotated = flip_slots(character_to_slots(char))
    assert rotated == character_to_slots(expected)


def test_flip_rejects_division():
    assert flip_slots(character_to_slots("/")) is None
    assert flip_bits(BoardState.from_equation("8/4=2").bits) is None
    assert BoardState.from_equation("8/4=2").flipped() is None


def test_flip_reverses_positions():
    board = BoardState.from_equation("6+9=15")
    assert board.flipped().to_equation() == "51=6+9"


def test_symmetric_board_is_unchanged():
    board = BoardState.from_equation("88=88")
    assert board.flipped() == board


@pytest.mark.parametrize("equation", ["5+7=2", "6-4=2", "10x8=80"])
def test_flip_is_involution(equation):
    board = equation_to_board(equation)
    assert flip_board(flip_board(board)) == board


def test_padding():
    board = BoardState.from_equation("1=1")
    padded = board.padded(prepend=True, append=True)
    assert padded.bits == (0,) + board.bits + (0,)
    assert padded.to_equation() == " 1=1 "


def test_diff_single_move():
    start = BoardState.from_equation("5+7=2")
    end = BoardState.from_equation("9-7=2")
    assert start.diff(end) == [Move(from_position=1, from_bit=8, to_position=0, to_bit=1)]


def test_diff_in_place_move():
    moves = diff_boards(
        BoardState.from_equation("6").bits, BoardState.from_equation("0").bits
    )
    assert moves == [Move(0, 6, 0, 1)]
    assert moves[0].is_in_place


def test_diff_unavailable():
    one = BoardState.from_equation("1").bits
    assert diff_boards(one, BoardState.from_equation("7").bits) is None
    assert diff_boards(one, BoardState.from_equation("1=").bits) is None


def test_diff_requires_board_state():
    with pytest.raises(TypeError):
        BoardState.from_equation("1").diff("1")


def test_lit_bits():
    board = BoardState.from_equation("1-")
    assert list(board.lit_bits()) == [(0, 1), (0, 2), (1, 6)]

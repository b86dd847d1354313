"""
Board State Module - Immutable board representation for matchstick equations.

A Board is a tuple of Slot patterns, one per character position.
A BitBoard is the same board as a tuple of plain 13-bit integers, which is
what the search engine hashes and mutates.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..oracle import normalize_equation
from .move import Move, diff_boards
from .slots import (
    BITS_PER_CHAR,
    DIVISION,
    FULL_MASK,
    Slot,
    character_to_slots,
    count_matchsticks,
    recognize_character,
)

Board = Tuple[Slot, ...]
BitBoard = Tuple[int, ...]

__all__ = [
    "Board",
    "BitBoard",
    "BoardState",
    "normalize_equation",
    "equation_to_board",
    "board_to_equation",
    "board_to_bits",
    "bits_to_board",
    "bits_to_equation",
    "flip_slots",
    "flip_board",
    "flip_bits",
]


def equation_to_board(equation: str) -> Board:
    """Map every character of an equation to its slot pattern."""
    return tuple(character_to_slots(char) for char in equation)


def board_to_equation(board: Board) -> Optional[str]:
    """
    Convert a board back to an equation string.

    Returns:
        The equation, or None if any position is unrecognizable
    """
    chars = []
    for slots in board:
        char = recognize_character(slots)
        if char is None:
            return None
        chars.append(char)
    return "".join(chars)


def board_to_bits(board: Board) -> BitBoard:
    """Pack a board into one integer per position."""
    return tuple(int(slots) for slots in board)


def bits_to_board(bits: BitBoard) -> Board:
    """Unpack a BitBoard into Slot patterns."""
    return tuple(Slot(value) for value in bits)


_ROTATION_FIXED = int(Slot.G | Slot.ALTG | Slot.ADDV | Slot.MUL_TL_BR | Slot.MUL_TR_BL)
_ROTATION_PAIRS = tuple(
    (int(first), int(second))
    for first, second in ((Slot.A, Slot.D), (Slot.B, Slot.E), (Slot.C, Slot.F))
)
_DIVISION = int(DIVISION)


def _rotate_pattern(pattern: int) -> Optional[int]:
    if pattern & _DIVISION:
        return None

    # A one is drawn right-aligned and stays right-aligned after rotation
    if recognize_character(pattern) == "1":
        return pattern

    rotated = pattern & _ROTATION_FIXED
    for first, second in _ROTATION_PAIRS:
        if pattern & first:
            rotated |= second
        if pattern & second:
            rotated |= first
    return rotated


_ROTATION_TABLE: Tuple[Optional[int], ...] = tuple(
    _rotate_pattern(pattern) for pattern in range(FULL_MASK + 1)
)


def flip_slots(slots: int) -> Optional[Slot]:
    """
    Rotate a single character cell by 180 degrees.

    Swaps a<->d, b<->e, c<->f and keeps the middle bars, the addition
    vertical and the multiplication diagonals in place.

    Returns:
        Rotated pattern, or None if a division bar is lit
    """
    rotated = _ROTATION_TABLE[int(slots) & FULL_MASK]
    if rotated is None:
        return None
    return Slot(rotated)


def flip_board(board: Board) -> Optional[Board]:
    """
    Rotate a whole board by 180 degrees.

    Reverses position order and rotates each cell.

    Returns:
        Rotated board, or None if any position cannot be rotated
    """
    flipped = flip_bits(board_to_bits(board))
    if flipped is None:
        return None
    return bits_to_board(flipped)


def flip_bits(bits: BitBoard) -> Optional[BitBoard]:
    """flip_board() for the packed representation."""
    flipped = []
    for value in reversed(bits):
        rotated = _ROTATION_TABLE[value]
        if rotated is None:
            return None
        flipped.append(rotated)
    return tuple(flipped)


def bits_to_equation(bits: BitBoard) -> Optional[str]:
    """board_to_equation() for the packed representation."""
    chars = []
    for value in bits:
        char = recognize_character(value)
        if char is None:
            return None
        chars.append(char)
    return "".join(chars)


@dataclass(frozen=True)
class BoardState:
    """
    Immutable matchstick board.

    Uses a tuple of ints for hashability and immutability.
    Bit i of entry j is slot i of character position j.

    Attributes:
        bits: Packed board, one 13-bit integer per position
    """
    bits: BitBoard

    @classmethod
    def from_equation(cls, equation: str) -> 'BoardState':
        """Create BoardState from an equation string (no normalization)."""
        return cls(bits=board_to_bits(equation_to_board(equation)))

    @classmethod
    def from_board(cls, board: Board) -> 'BoardState':
        """Create BoardState from a tuple of Slot patterns."""
        return cls(bits=board_to_bits(board))

    def to_board(self) -> Board:
        """Unpack into Slot patterns."""
        return bits_to_board(self.bits)

    def to_equation(self) -> Optional[str]:
        """Decode to an equation string, or None if unrecognizable."""
        return bits_to_equation(self.bits)

    def flipped(self) -> Optional['BoardState']:
        """Board rotated by 180 degrees, or None if unflippable."""
        bits = flip_bits(self.bits)
        if bits is None:
            return None
        return BoardState(bits=bits)

    def padded(self, prepend: bool = False, append: bool = False) -> 'BoardState':
        """
        Add empty character cells around the board.

        Args:
            prepend: Add an empty leading cell
            append: Add an empty trailing cell

        Returns:
            New BoardState with the extra cells
        """
        bits = ((0,) if prepend else ()) + self.bits + ((0,) if append else ())
        return BoardState(bits=bits)

    def lit_bits(self) -> Iterator[Tuple[int, int]]:
        """Yield (position, bit) for every lit slot, left to right."""
        for position, value in enumerate(self.bits):
            for bit in range(BITS_PER_CHAR):
                if value & (1 << bit):
                    yield position, bit

    def count_matchsticks(self) -> int:
        """Total number of matchsticks on the board."""
        return sum(count_matchsticks(value) for value in self.bits)

    def diff(self, other: 'BoardState') -> Optional[List[Move]]:
        """
        Find the matchstick moves that turn this board into another.

        Args:
            other: Target board of the same length

        Returns:
            List of moves, or None if no diff is available
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        return diff_boards(self.bits, other.bits)

    def __len__(self) -> int:
        return len(self.bits)

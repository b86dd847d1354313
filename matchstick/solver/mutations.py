"""
Mutation Module - Single matchstick relocations on a packed board.

Every lit slot anywhere on the board may be picked up and laid into any
slot that was empty on the board before the pick-up. With flipping
enabled, the board may additionally be turned upside down between the
pick-up and the lay-down.
"""

from typing import Iterator, List, NamedTuple, Optional, Tuple

from .board import BitBoard, flip_bits
from .slots import BITS_PER_CHAR, Slot

# Slots a prepended cell can receive when this is the last move
PREPEND_SLOTS_LAST_MOVE = int(Slot.G)

# Slots a prepended cell can receive while more moves remain
PREPEND_SLOTS = int(
    Slot.G | Slot.ADDV | Slot.MUL_TL_BR | Slot.MUL_TR_BL | Slot.ALTG
    | Slot.DIVB | Slot.DIVT | Slot.B | Slot.C
)


class Mutation(NamedTuple):
    """
    A board produced by relocating one matchstick.

    Attributes:
        bits: Resulting packed board
        flipped: True if the board was turned upside down during the move,
                 in which case bits are in the rotated orientation
    """
    bits: BitBoard
    flipped: bool


def prepend_allowed_slots(remaining: int) -> int:
    """
    Slots a stick may be laid into on the prepended cell.

    Args:
        remaining: Moves left in the budget, including this one

    Returns:
        Bitmask of allowed slots
    """
    if remaining <= 1:
        return PREPEND_SLOTS_LAST_MOVE
    return PREPEND_SLOTS


def _split_bits(bits: BitBoard) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    lit = []
    unlit = []
    for position, value in enumerate(bits):
        for bit in range(BITS_PER_CHAR):
            if value & (1 << bit):
                lit.append((position, bit))
            else:
                unlit.append((position, bit))
    return lit, unlit


def generate_mutations(
    bits: BitBoard,
    remaining: int = 1,
    allow_flip: bool = False,
    prepend_index: Optional[int] = None,
) -> Iterator[Mutation]:
    """
    Lazily generate every board one matchstick move away.

    Args:
        bits: Packed source board
        remaining: Moves left in the budget, including this one
        allow_flip: Also yield moves that turn the board over between
                    picking up and laying down the matchstick
        prepend_index: Position of a prepended cell in this orientation,
                       whose receivable slots are restricted

    Yields:
        Mutation records, non-flipped ones first for each picked-up stick
    """
    lit, unlit = _split_bits(bits)
    allowed = prepend_allowed_slots(remaining)
    size = len(bits)

    for from_position, from_bit in lit:
        removed = list(bits)
        removed[from_position] &= ~(1 << from_bit)

        for to_position, to_bit in unlit:
            mask = 1 << to_bit
            if to_position == prepend_index and not mask & allowed:
                continue
            board = removed.copy()
            board[to_position] |= mask
            yield Mutation(tuple(board), False)

        if not allow_flip:
            continue

        rotated = flip_bits(tuple(removed))
        if rotated is None:
            continue

        rotated_prepend = None if prepend_index is None else size - 1 - prepend_index
        for to_position, value in enumerate(rotated):
            for to_bit in range(BITS_PER_CHAR):
                mask = 1 << to_bit
                if value & mask:
                    continue
                if to_position == rotated_prepend and not mask & allowed:
                    continue
                board = list(rotated)
                board[to_position] |= mask
                yield Mutation(tuple(board), True)

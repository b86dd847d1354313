"""
Move Module - Relocation of a single matchstick.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .slots import BITS_PER_CHAR, slot_bit, slot_name


@dataclass(frozen=True, order=True)
class Move:
    """
    Represents one matchstick taken from a slot and laid into another.

    Positions index the character cells of the equation, left to right.
    Bits index the slots of a cell (see slots.SLOT_NAMES).

    Attributes:
        from_position: Character position the matchstick is taken from
        from_bit: Slot bit the matchstick is taken from
        to_position: Character position the matchstick is placed in
        to_bit: Slot bit the matchstick is placed in
    """
    from_position: int
    from_bit: int
    to_position: int
    to_bit: int

    @property
    def from_slot(self) -> str:
        """Name of the source slot."""
        return slot_name(self.from_bit)

    @property
    def to_slot(self) -> str:
        """Name of the destination slot."""
        return slot_name(self.to_bit)

    @property
    def is_in_place(self) -> bool:
        """True if the matchstick stays within one character cell."""
        return self.from_position == self.to_position

    def shifted(self, offset: int) -> 'Move':
        """Move with both positions shifted by offset."""
        return Move(
            from_position=self.from_position + offset,
            from_bit=self.from_bit,
            to_position=self.to_position + offset,
            to_bit=self.to_bit,
        )

    def describe(self) -> str:
        """Human-readable description for display."""
        return (
            f"move {self.from_slot} of position {self.from_position} "
            f"to {self.to_slot} of position {self.to_position}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the lookup cache."""
        return {
            "from_position": self.from_position,
            "from_slot": self.from_slot,
            "to_position": self.to_position,
            "to_slot": self.to_slot,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Move':
        """Inverse of to_dict()."""
        return cls(
            from_position=int(data["from_position"]),
            from_bit=slot_bit(data["from_slot"]),
            to_position=int(data["to_position"]),
            to_bit=slot_bit(data["to_slot"]),
        )


def _lit_positions(bits: Sequence[int]) -> List[Tuple[int, int]]:
    return [
        (position, bit)
        for position, value in enumerate(bits)
        for bit in range(BITS_PER_CHAR)
        if value & (1 << bit)
    ]


def diff_boards(start: Sequence[int], end: Sequence[int]) -> Optional[List[Move]]:
    """
    Compute the matchstick moves between two packed boards.

    Removed and added matchsticks are each collected in (position, bit)
    order and paired up in that order.

    Args:
        start: Packed board before the moves
        end: Packed board after the moves

    Returns:
        List of moves, or None if the boards differ in length or in
        matchstick count (no diff available)
    """
    if len(start) != len(end):
        return None

    start_lit = _lit_positions(start)
    end_lit = _lit_positions(end)
    start_set = set(start_lit)
    end_set = set(end_lit)

    removed = [slot for slot in start_lit if slot not in end_set]
    added = [slot for slot in end_lit if slot not in start_set]

    if len(removed) != len(added):
        return None

    return [
        Move(from_position=src[0], from_bit=src[1], to_position=dst[0], to_bit=dst[1])
        for src, dst in zip(removed, added)
    ]

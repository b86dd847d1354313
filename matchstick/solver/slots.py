"""
Slot Model Module - Matchstick positions within a single character cell.

Every character cell has 13 fixed positions where a matchstick can lie:

     a            a:  top horizontal          altg: second middle bar (for =)
   f   b          b:  top-right vertical      addv: vertical bar of +
     g            c:  bottom-right vertical   mul_tl_br, mul_tr_bl: diagonals of x
   e   c          d:  bottom horizontal       divb, divt: bars of /
     d            e/f: left verticals         g:  middle horizontal

A slot pattern is an IntFlag combination of those positions, so the
bit-packed form used by the search engine is simply int(pattern).
"""

from enum import IntFlag
from typing import Dict, List, Optional, Tuple


class Slot(IntFlag):
    """Matchstick position flags. Bit order is fixed and shared with BitBoard."""
    NONE = 0
    A = 1 << 0
    B = 1 << 1
    C = 1 << 2
    D = 1 << 3
    E = 1 << 4
    F = 1 << 5
    G = 1 << 6
    ALTG = 1 << 7
    ADDV = 1 << 8
    MUL_TL_BR = 1 << 9
    MUL_TR_BL = 1 << 10
    DIVB = 1 << 11
    DIVT = 1 << 12


BITS_PER_CHAR = 13
FULL_MASK = (1 << BITS_PER_CHAR) - 1

# Slot names indexed by bit number
SLOT_NAMES: Tuple[str, ...] = (
    "a", "b", "c", "d", "e", "f", "g",
    "altg", "addv", "mul_tl_br", "mul_tr_bl", "divb", "divt",
)

MIDDLE_BARS = Slot.G | Slot.ALTG
DIVISION = Slot.DIVB | Slot.DIVT
_BODY_MASK = FULL_MASK & ~int(MIDDLE_BARS)

# Middle bar modes used by the recognition rules
MID_NONE = "none"   # neither g nor altg
MID_XOR = "xor"     # exactly one of g / altg
MID_BOTH = "both"   # g and altg together (=)

# Recognition rules: character -> (exact non-middle slots, middle bar mode)
_RULES: Tuple[Tuple[str, Slot, str], ...] = (
    ("0", Slot.A | Slot.B | Slot.C | Slot.D | Slot.E | Slot.F, MID_NONE),
    ("1", Slot.B | Slot.C, MID_NONE),
    ("2", Slot.A | Slot.B | Slot.D | Slot.E, MID_XOR),
    ("3", Slot.A | Slot.B | Slot.C | Slot.D, MID_XOR),
    ("4", Slot.B | Slot.C | Slot.F, MID_XOR),
    ("5", Slot.A | Slot.C | Slot.D | Slot.F, MID_XOR),
    ("6", Slot.A | Slot.C | Slot.D | Slot.E | Slot.F, MID_XOR),
    ("7", Slot.A | Slot.B | Slot.C, MID_NONE),
    ("8", Slot.A | Slot.B | Slot.C | Slot.D | Slot.E | Slot.F, MID_XOR),
    ("9", Slot.A | Slot.B | Slot.C | Slot.D | Slot.F, MID_XOR),
    ("+", Slot.ADDV, MID_XOR),
    ("-", Slot.NONE, MID_XOR),
    ("=", Slot.NONE, MID_BOTH),
    ("x", Slot.MUL_TL_BR | Slot.MUL_TR_BL, MID_NONE),
    ("/", Slot.DIVB | Slot.DIVT, MID_NONE),
    (" ", Slot.NONE, MID_NONE),
)

_CANONICAL_MIDDLE = {
    MID_NONE: Slot.NONE,
    MID_XOR: Slot.G,
    MID_BOTH: Slot.G | Slot.ALTG,
}

# Canonical pattern for every character of the alphabet
SLOT_PATTERNS: Dict[str, Slot] = {
    char: body | _CANONICAL_MIDDLE[mode] for char, body, mode in _RULES
}

ALPHABET = frozenset(SLOT_PATTERNS)


def _middle_mode(pattern: int) -> str:
    g = bool(pattern & Slot.G)
    altg = bool(pattern & Slot.ALTG)
    if g and altg:
        return MID_BOTH
    if g or altg:
        return MID_XOR
    return MID_NONE


def _build_recognition_table() -> Tuple[Optional[str], ...]:
    """Evaluate every rule against all 2^13 patterns once."""
    rules = [(char, int(body), mode) for char, body, mode in _RULES]
    table: List[Optional[str]] = [None] * (FULL_MASK + 1)
    for pattern in range(FULL_MASK + 1):
        body = pattern & _BODY_MASK
        mode = _middle_mode(pattern)
        for char, rule_body, rule_mode in rules:
            if body == rule_body and mode == rule_mode:
                table[pattern] = char
                break
    return tuple(table)


_RECOGNITION_TABLE = _build_recognition_table()


def character_to_slots(char: str) -> Slot:
    """
    Get the canonical slot pattern for a character.

    Args:
        char: Single display character

    Returns:
        Slot pattern, or Slot.NONE for characters outside the alphabet
    """
    return SLOT_PATTERNS.get(char, Slot.NONE)


def recognize_character(pattern: int) -> Optional[str]:
    """
    Recognize which character a slot pattern represents.

    Args:
        pattern: Slot pattern (Slot flags or the raw 13-bit int)

    Returns:
        The character, or None if the pattern is not recognized
    """
    return _RECOGNITION_TABLE[int(pattern) & FULL_MASK]


def count_matchsticks(pattern: int) -> int:
    """Number of lit slots in a pattern."""
    return bin(int(pattern) & FULL_MASK).count("1")


def slot_name(bit: int) -> str:
    """Name of the slot at a bit index (e.g. 8 -> 'addv')."""
    return SLOT_NAMES[bit]


def slot_bit(name: str) -> int:
    """Bit index of a slot name (e.g. 'addv' -> 8)."""
    return SLOT_NAMES.index(name)

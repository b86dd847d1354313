"""
Tests for the slot model: character patterns and recognition.

Usage:
    pytest tests/test_slots.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick.solver.slots import (
    ALPHABET,
    SLOT_NAMES,
    SLOT_PATTERNS,
    Slot,
    character_to_slots,
    count_matchsticks,
    recognize_character,
    slot_bit,
    slot_name,
)


@pytest.mark.parametrize("char", sorted(ALPHABET))
def test_alphabet_round_trip(char):
    assert recognize_character(character_to_slots(char)) == char


def test_unknown_character_has_no_sticks():
    assert character_to_slots("?") == Slot.NONE
    assert recognize_character(Slot.NONE) == " "


@pytest.mark.parametrize("char,sticks", [
    ("8", 7), ("0", 6), ("1", 2), ("7", 3), ("4", 4),
    ("+", 2), ("-", 1), ("=", 2), ("x", 2), ("/", 2), (" ", 0),
])
def test_matchstick_counts(char, sticks):
    assert count_matchsticks(character_to_slots(char)) == sticks


def test_either_middle_bar_makes_a_minus():
    assert recognize_character(Slot.G) == "-"
    assert recognize_character(Slot.ALTG) == "-"
    assert recognize_character(Slot.G | Slot.ALTG) == "="


def test_digit_with_both_middle_bars_is_rejected():
    nine = character_to_slots("9")
    assert recognize_character(nine | Slot.ALTG) is None


def test_alternate_middle_bar_digit():
    two = (character_to_slots("2") & ~Slot.G) | Slot.ALTG
    assert recognize_character(two) == "2"


def test_partial_patterns_are_not_recognized():
    assert recognize_character(Slot.A) is None
    assert recognize_character(Slot.B) is None
    assert recognize_character(Slot.ADDV) is None
    assert recognize_character(Slot.DIVB) is None


def test_canonical_patterns():
    assert SLOT_PATTERNS["1"] == Slot.B | Slot.C
    assert SLOT_PATTERNS["-"] == Slot.G
    assert SLOT_PATTERNS["+"] == Slot.G | Slot.ADDV
    assert SLOT_PATTERNS["/"] == Slot.DIVB | Slot.DIVT


def test_bit_order():
    assert int(Slot.A) == 1
    assert int(Slot.DIVT) == 4096
    assert SLOT_NAMES[0] == "a"
    assert slot_name(8) == "addv"
    assert slot_bit("altg") == 7
    for bit, name in enumerate(SLOT_NAMES):
        assert 1 << bit == int(Slot[name.upper()])

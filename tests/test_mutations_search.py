"""
Tests for the move generator and the bounded search engine.

Usage:
    pytest tests/test_mutations_search.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick.solver.board import BoardState
from matchstick.solver.context import SolutionContext
from matchstick.solver.mutations import (
    PREPEND_SLOTS,
    PREPEND_SLOTS_LAST_MOVE,
    generate_mutations,
    prepend_allowed_slots,
)
from matchstick.solver.ranker import rank_solutions
from matchstick.solver.search import (
    BoundedSearch,
    SearchOptions,
    SearchResult,
    SearchState,
    explore_from,
)
from matchstick.solver.slots import Slot, count_matchsticks

ONE = BoardState.from_equation("1").bits


def test_mutations_keep_matchstick_count():
    board = BoardState.from_equation("5+7=2")
    total = board.count_matchsticks()
    for mutation in generate_mutations(board.bits, allow_flip=True):
        assert sum(count_matchsticks(value) for value in mutation.bits) == total
        assert len(mutation.bits) == len(board)


def test_mutation_counts():
    plain = list(generate_mutations(ONE))
    # 2 lit sticks, each laid into one of 11 empty slots
    assert len(plain) == 22
    assert not any(mutation.flipped for mutation in plain)

    with_flip = list(generate_mutations(ONE, allow_flip=True))
    flipped = [mutation for mutation in with_flip if mutation.flipped]
    assert len(with_flip) == 22 + 24
    assert len(flipped) == 24


def test_stick_cannot_return_to_its_own_slot():
    for mutation in generate_mutations(ONE):
        assert mutation.bits != ONE


def test_flip_skipped_while_division_bar_lit():
    board = BoardState.from_equation("8/4=2").bits
    # One move can take away only one of the two division bars
    assert not any(m.flipped for m in generate_mutations(board, allow_flip=True))


def test_prepend_allowed_slots():
    assert prepend_allowed_slots(1) == PREPEND_SLOTS_LAST_MOVE == int(Slot.G)
    assert prepend_allowed_slots(2) == PREPEND_SLOTS
    assert prepend_allowed_slots(3) == PREPEND_SLOTS


def test_prepend_cell_restricted_on_last_move():
    padded = (0,) + ONE
    mutations = list(generate_mutations(padded, remaining=1, prepend_index=0))
    assert len(mutations) == 2 * (1 + 11)
    for mutation in mutations:
        assert mutation.bits[0] in (0, int(Slot.G))


def test_prepend_cell_with_moves_left():
    padded = (0,) + ONE
    mutations = list(generate_mutations(padded, remaining=2, prepend_index=0))
    assert len(mutations) == 2 * (9 + 11)
    for mutation in mutations:
        assert mutation.bits[0] & ~PREPEND_SLOTS == 0


def test_search_depth_zero():
    result = BoundedSearch(SearchOptions(max_depth=0)).run(ONE)
    assert result.states == [SearchState(ONE, 0, False)]
    assert result.states_generated == 0


def test_search_depth_one():
    result = BoundedSearch(SearchOptions(max_depth=1)).run(ONE)
    assert result.initial == ONE
    assert len(result.states) == 1 + 22
    assert result.states[0] == SearchState(ONE, 0, False)
    assert not result.was_cancelled


def test_search_collects_intermediate_boards():
    shallow = BoundedSearch(SearchOptions(max_depth=1)).run(ONE)
    deep = BoundedSearch(SearchOptions(max_depth=2)).run(ONE)
    deep_boards = {bits for bits, _ in deep.boards()}
    assert {bits for bits, _ in shallow.boards()} <= deep_boards


def test_search_pads_board():
    options = SearchOptions(max_depth=1, allow_prepend=True, allow_append=True)
    result = BoundedSearch(options).run(ONE)
    assert result.initial == (0,) + ONE + (0,)
    assert options.position_offset == 1


def test_search_cancellation():
    context = SolutionContext(equation="5+7=2", max_moves=2)
    context.cancel()
    board = BoardState.from_equation("5+7=2").bits
    result = BoundedSearch(SearchOptions(max_depth=2), context).run(board)
    assert result.was_cancelled
    assert result.states_generated == BoundedSearch.CANCEL_CHECK_INTERVAL


def test_explore_from_matches_run():
    options = SearchOptions(max_depth=1)
    direct = BoundedSearch(options).run(ONE)
    sharded = explore_from([SearchState(ONE, 0, False)], ONE, options)
    assert sharded.states == direct.states


def test_merge_results():
    first = SearchResult(initial=ONE, states=[SearchState(ONE, 0, False)], states_generated=3)
    other = SearchState((int(Slot.B | Slot.G),), 1, False)
    second = SearchResult(initial=ONE, states=[SearchState(ONE, 0, False), other],
                          states_generated=4)
    merged = first.merge(second)
    assert merged.states == [SearchState(ONE, 0, False), other]
    assert merged.states_generated == 7


def test_merge_rejects_different_boards():
    with pytest.raises(ValueError):
        SearchResult(initial=ONE).merge(SearchResult(initial=(0,)))


def test_rank_solutions_from_search():
    board = BoardState.from_equation("5+7=2")
    result = BoundedSearch(SearchOptions(max_depth=1)).run(board.bits)
    solutions = rank_solutions(result, "5+7=2", allow_flip=False)
    assert "9-7=2" in [solution.equation for solution in solutions]
    assert not any(solution.flipped for solution in solutions)


def test_rank_solutions_uses_oracle():
    board = BoardState.from_equation("5+7=2")
    result = BoundedSearch(SearchOptions(max_depth=1)).run(board.bits)
    solutions = rank_solutions(result, "5+7=2", allow_flip=False, oracle=lambda equation: True)
    # Every recognizable board other than the puzzle itself is accepted
    assert len(solutions) > 1
    assert "5+7=2" not in [solution.equation for solution in solutions]

"""
Bounded Search Module - Depth-bounded exhaustive exploration of move sequences.

Every board reachable within the move budget is collected, including the
intermediate ones: an equation can become valid before the budget is
spent. A visited set keyed by the exact search state keeps identical
states reached through different move orders from being expanded twice.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Set, Tuple

from .board import BitBoard, BoardState
from .context import SolutionContext
from .mutations import generate_mutations

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOptions:
    """
    Search parameters.

    Attributes:
        max_depth: Move budget
        allow_prepend: Pad the board with an empty leading cell
        allow_append: Pad the board with an empty trailing cell
        flip_between_moves: Allow turning the board over during a move
    """
    max_depth: int = 1
    allow_prepend: bool = False
    allow_append: bool = False
    flip_between_moves: bool = False

    @property
    def position_offset(self) -> int:
        """Index of the first original character in a padded board."""
        return 1 if self.allow_prepend else 0

    def pad(self, bits: BitBoard) -> BitBoard:
        """Add the empty cells requested by the options."""
        return BoardState(bits=bits).padded(self.allow_prepend, self.allow_append).bits


class SearchState(NamedTuple):
    """
    Node of the search.

    Attributes:
        bits: Packed board
        depth: Moves made so far
        rotated: Board is upside down relative to the start
                 (only with flip_between_moves)
    """
    bits: BitBoard
    depth: int
    rotated: bool = False


@dataclass
class SearchResult:
    """
    Everything the search reached.

    Attributes:
        initial: Padded starting board
        states: Distinct visited states, in visit order
        was_cancelled: True if the search stopped before completion
        states_generated: Number of successor boards generated
    """
    initial: BitBoard
    states: List[SearchState] = field(default_factory=list)
    was_cancelled: bool = False
    states_generated: int = 0

    def boards(self) -> List[Tuple[BitBoard, bool]]:
        """Distinct (bits, rotated) pairs in visit order."""
        seen: Set[Tuple[BitBoard, bool]] = set()
        boards = []
        for state in self.states:
            key = (state.bits, state.rotated)
            if key not in seen:
                seen.add(key)
                boards.append(key)
        return boards

    def merge(self, other: 'SearchResult') -> 'SearchResult':
        """Union of two results over the same starting board."""
        if other.initial != self.initial:
            raise ValueError("Cannot merge searches from different starting boards")

        seen = set(self.states)
        states = list(self.states)
        for state in other.states:
            if state not in seen:
                seen.add(state)
                states.append(state)
        return SearchResult(
            initial=self.initial,
            states=states,
            was_cancelled=self.was_cancelled or other.was_cancelled,
            states_generated=self.states_generated + other.states_generated,
        )


class BoundedSearch:
    """
    Depth-first exploration of the move graph.

    States are (board, depth, rotated). A state at max_depth is collected
    but not expanded. There is no iteration cap; the only early stop is
    cancellation through the SolutionContext, checked every
    CANCEL_CHECK_INTERVAL generated boards.
    """

    CANCEL_CHECK_INTERVAL = 256

    def __init__(self, options: SearchOptions, context: Optional[SolutionContext] = None):
        self.options = options
        self.context = context

    def run(self, bits: BitBoard) -> SearchResult:
        """
        Explore everything reachable from an unpadded board.

        Args:
            bits: Packed board of the equation

        Returns:
            SearchResult over the padded board
        """
        initial = self.options.pad(bits)
        return self.explore([SearchState(initial, 0, False)], initial)

    def explore(self, roots: Iterable[SearchState], initial: BitBoard) -> SearchResult:
        """
        Explore from arbitrary roots with a fresh visited set.

        Args:
            roots: States to start from
            initial: Padded starting board the roots descend from

        Returns:
            SearchResult containing the roots and everything below them
        """
        max_depth = self.options.max_depth
        visited: Set[SearchState] = set()
        result = SearchResult(initial=initial)
        stack = list(reversed(list(roots)))
        generated = 0

        while stack:
            state = stack.pop()
            if state in visited:
                continue
            visited.add(state)
            result.states.append(state)

            if state.depth >= max_depth:
                continue

            mutations = generate_mutations(
                state.bits,
                remaining=max_depth - state.depth,
                allow_flip=self.options.flip_between_moves,
                prepend_index=self._prepend_index(state),
            )
            for mutation in mutations:
                generated += 1
                if generated % self.CANCEL_CHECK_INTERVAL == 0 and self._is_cancelled():
                    logger.info(
                        f"[BoundedSearch] Cancelled after {len(result.states)} states"
                    )
                    result.was_cancelled = True
                    result.states_generated = generated
                    return result

                child = SearchState(
                    mutation.bits,
                    state.depth + 1,
                    state.rotated != mutation.flipped,
                )
                if child not in visited:
                    stack.append(child)

        result.states_generated = generated
        logger.debug(
            f"[BoundedSearch] depth {max_depth}: {len(result.states)} states, "
            f"{generated} boards generated"
        )
        return result

    def _prepend_index(self, state: SearchState) -> Optional[int]:
        """Position of the prepended cell in the state's orientation."""
        if not self.options.allow_prepend:
            return None
        return len(state.bits) - 1 if state.rotated else 0

    def _is_cancelled(self) -> bool:
        return self.context is not None and self.context.is_cancelled()


def explore_from(
    roots: List[SearchState],
    initial: BitBoard,
    options: SearchOptions,
) -> SearchResult:
    """
    Explore a shard of root states in isolation.

    Module-level so it can be sent to worker processes.
    """
    return BoundedSearch(options).explore(roots, initial)

"""
Solution Ranker Module - Turns explored boards into ordered solutions.

Each distinct explored board is read as it lies and, with flipping
enabled, upside down. A reading becomes a solution when every position is
a recognizable character, the equation differs from the puzzle and the
oracle accepts it. Solutions are ordered upright first, then by number of
moves; when several boards read as the same equation, the first one in
that order wins.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..oracle import evaluate_equation, normalize_equation
from .board import BitBoard, bits_to_equation, flip_bits
from .move import Move, diff_boards
from .search import SearchResult
from .solution import Solution

logger = logging.getLogger(__name__)


class SolutionRanker:
    """
    Filters and orders the boards produced by a search.

    Attributes:
        original_equation: Normalized puzzle equation
        allow_flip: Also read each board upside down
        oracle: Callable deciding whether an equation is true
        position_offset: Padded index of the first original character
        candidates_checked: Distinct equations sent to the oracle
    """

    def __init__(
        self,
        original_equation: str,
        allow_flip: bool = True,
        oracle: Callable[[str], bool] = evaluate_equation,
        position_offset: int = 0,
    ):
        self.original_equation = normalize_equation(original_equation)
        self.allow_flip = allow_flip
        self.oracle = oracle
        self.position_offset = position_offset
        self._verdicts: Dict[str, bool] = {}

    @property
    def candidates_checked(self) -> int:
        return len(self._verdicts)

    def rank(self, result: SearchResult) -> List[Solution]:
        """
        Build the ordered solution list for a search result.

        Args:
            result: Boards reached by the search

        Returns:
            Unique solutions, upright first, then fewer moves first
        """
        candidates: List[Solution] = []

        for bits, rotated in result.boards():
            if rotated:
                upright = flip_bits(bits)
                if upright is None:
                    continue
                readings = [(bits, True), (upright, True)]
            else:
                upright = bits
                readings = [(bits, False)]
                if self.allow_flip:
                    flipped = flip_bits(bits)
                    if flipped is not None:
                        readings.append((flipped, True))

            moves: Optional[Tuple[Move, ...]] = None
            for reading, flipped in readings:
                equation = self._accept(reading)
                if equation is None:
                    continue
                if moves is None:
                    moves = self._moves(result.initial, upright)
                    if moves is None:
                        logger.debug(f"[Ranker] No diff available for {equation}")
                        break
                candidates.append(Solution(equation=equation, moves=moves, flipped=flipped))

        candidates.sort(key=Solution.sort_key)

        seen = set()
        solutions = []
        for candidate in candidates:
            if candidate.equation in seen:
                continue
            seen.add(candidate.equation)
            solutions.append(candidate)

        logger.debug(
            f"[Ranker] {len(result.states)} states, {self.candidates_checked} "
            f"candidates, {len(solutions)} solutions"
        )
        return solutions

    def _accept(self, bits: BitBoard) -> Optional[str]:
        """Normalized equation if the board reads as a new true equation."""
        equation = bits_to_equation(bits)
        if equation is None:
            return None

        equation = normalize_equation(equation)
        if equation == self.original_equation:
            return None

        verdict = self._verdicts.get(equation)
        if verdict is None:
            verdict = self.oracle(equation)
            self._verdicts[equation] = verdict
        return equation if verdict else None

    def _moves(self, initial: BitBoard, bits: BitBoard) -> Optional[Tuple[Move, ...]]:
        moves = diff_boards(initial, bits)
        if moves is None:
            return None
        return tuple(move.shifted(-self.position_offset) for move in moves)


def rank_solutions(
    result: SearchResult,
    original_equation: str,
    allow_flip: bool = True,
    oracle: Callable[[str], bool] = evaluate_equation,
    position_offset: int = 0,
) -> List[Solution]:
    """
    Convenience wrapper around SolutionRanker.rank().

    Args:
        result: Boards reached by the search
        original_equation: Puzzle equation
        allow_flip: Also read each board upside down
        oracle: Callable deciding whether an equation is true
        position_offset: Padded index of the first original character

    Returns:
        Ordered unique solutions
    """
    ranker = SolutionRanker(
        original_equation,
        allow_flip=allow_flip,
        oracle=oracle,
        position_offset=position_offset,
    )
    return ranker.rank(result)

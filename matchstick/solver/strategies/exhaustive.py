"""
Exhaustive Strategy - Single-threaded bounded search over every move sequence.
"""

import time
import logging

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..ranker import SolutionRanker
from ..search import BoundedSearch
from ..solution import SolveResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class ExhaustiveStrategy(SolverStrategy):
    """
    Explores every board within the move budget, then filters once.

    Algorithm:
        1. Return nothing if the puzzle is already true
        2. Depth-first search from the (padded) puzzle board, visiting each
           (board, depth) state once
        3. Read every distinct board upright and upside down, keep the
           true equations, order and de-duplicate them

    Performance:
        - depth 1: milliseconds for typical puzzles
        - depth 2: a few hundred thousand states for a 5-7 character
          puzzle, seconds in pure Python
        - depth 3+: grows by roughly lit x unlit boards per level
    """
    name = "exhaustive"
    description = "Exhaustive (default) - Bounded depth-first search"

    def solve(self, context: SolutionContext) -> SolveResult:
        """
        Compute all solutions by exhaustive bounded search.

        Args:
            context: Solution context with puzzle, options and cancellation

        Returns:
            SolveResult with solutions and metrics
        """
        start_time = time.perf_counter()

        if self._already_solved(context):
            logger.info(f"[Exhaustive] {context.normalized_equation} is already true")
            return self._build_result(context, [], start_time, already_solved=True)

        options = self.search_options(context)
        board = BoardState.from_equation(context.normalized_equation)

        context.report_progress(0.0, f"Searching {context.max_moves} move(s)")
        search_result = BoundedSearch(options, context).run(board.bits)

        context.report_progress(0.8, f"Checking {len(search_result.states)} boards")
        ranker = SolutionRanker(
            context.normalized_equation,
            allow_flip=context.allow_flip,
            position_offset=options.position_offset,
        )
        solutions = ranker.rank(search_result)
        context.report_progress(1.0, f"{len(solutions)} solution(s)")

        logger.info(
            f"[Exhaustive] {context.normalized_equation}: {len(solutions)} solutions, "
            f"{len(search_result.states)} states explored"
        )

        return self._build_result(
            context,
            solutions,
            start_time,
            states_explored=len(search_result.states),
            candidates_checked=ranker.candidates_checked,
            was_cancelled=search_result.was_cancelled,
        )

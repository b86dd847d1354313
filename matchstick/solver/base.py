"""
Base Strategy Module - Abstract base class for solving strategies.
"""

import time
from abc import ABC, abstractmethod
from typing import List

from ..oracle import evaluate_equation
from .context import SolutionContext
from .search import SearchOptions
from .solution import Solution, SolutionMetrics, SolveResult


class SolverStrategy(ABC):
    """
    Abstract base class for all solving strategies.

    Every strategy implements the same contract: for the puzzle and options
    in the context, return the ordered list of unique solutions reachable
    within the move budget. Strategies differ only in how they get there.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for help output
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SolutionContext) -> SolveResult:
        """
        Compute the solutions for the puzzle in the context.

        Must periodically check context.is_cancelled() and return
        a partial result if True.

        Args:
            context: Solution context with puzzle, options, cancellation

        Returns:
            SolveResult with solutions and metrics
        """
        pass

    def search_options(self, context: SolutionContext) -> SearchOptions:
        """Search parameters for the context."""
        return SearchOptions(
            max_depth=context.max_moves,
            allow_prepend=context.allow_prepend,
            allow_append=context.allow_append,
            flip_between_moves=context.flip_between_moves,
        )

    def _already_solved(self, context: SolutionContext) -> bool:
        """
        Check whether the puzzle is already a true equation.

        Args:
            context: Solution context

        Returns:
            True if there is nothing to solve
        """
        return evaluate_equation(context.normalized_equation)

    def _check_cancelled(self, context: SolutionContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _build_result(
        self,
        context: SolutionContext,
        solutions: List[Solution],
        start_time: float,
        states_explored: int = 0,
        candidates_checked: int = 0,
        was_cancelled: bool = False,
        already_solved: bool = False,
        cache_hit: bool = False,
    ) -> SolveResult:
        """Build SolveResult object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return SolveResult(
            equation=context.normalized_equation,
            solutions=solutions,
            was_cancelled=was_cancelled,
            already_solved=already_solved,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_explored=states_explored,
                candidates_checked=candidates_checked,
                strategy_name=self.name,
                cache_hit=cache_hit,
            )
        )

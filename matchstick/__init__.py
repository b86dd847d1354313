"""
Matchstick Equation Solver.

Finds every true equation reachable from a seven-segment matchstick
equation by moving at most a given number of matchsticks, optionally
reading the board upside down.

Usage:
    from matchstick import solve, matchstick_formatter

    for solution in solve("5+7=2", max_moves=1):
        print(solution.equation)

    print(matchstick_formatter("9-7=2"))
"""

import logging
from typing import Any, List, Optional

# The solver package registers the strategies; load it first
from .solver import (
    BoardState,
    Move,
    Solution,
    SolutionContext,
    SolveResult,
    create_strategy,
)
from .oracle import EquationError, evaluate_equation
from .formatter import matchstick_formatter

logger = logging.getLogger(__name__)

__version__ = "1.0.0"


def solve_with_result(
    equation: str,
    max_moves: int = 1,
    allow_flip: bool = True,
    allow_prepend: bool = False,
    allow_append: bool = False,
    strategy: str = "exhaustive",
    flip_between_moves: bool = False,
    timeout_sec: Optional[float] = None,
    **strategy_kwargs: Any,
) -> SolveResult:
    """
    Solve a puzzle and return the solutions with metrics.

    Args:
        equation: Puzzle equation, e.g. "5+7=2" (whitespace ignored, "*" means "x")
        max_moves: Maximum number of matchsticks to move
        allow_flip: Also accept results read upside down
        allow_prepend: Allow building a new leading character
        allow_append: Allow building a new trailing character
        strategy: Registered strategy name
        flip_between_moves: Allow turning the board over during a move
        timeout_sec: Stop searching after this many seconds (None = no limit)
        **strategy_kwargs: Passed to the strategy constructor

    Returns:
        SolveResult; solutions is empty if the puzzle is already true

    Raises:
        ValueError: If the strategy name is unknown or max_moves is negative
    """
    if max_moves < 0:
        raise ValueError(f"max_moves must be >= 0, got {max_moves}")

    context = SolutionContext(
        equation=equation,
        max_moves=max_moves,
        allow_flip=allow_flip,
        allow_prepend=allow_prepend,
        allow_append=allow_append,
        flip_between_moves=flip_between_moves,
        timeout_sec=timeout_sec,
    )
    solver = create_strategy(strategy, **strategy_kwargs)
    logger.debug(f"Solving {context.normalized_equation} with {solver.name}")
    return solver.solve(context)


def solve(
    equation: str,
    max_moves: int = 1,
    allow_flip: bool = True,
    allow_prepend: bool = False,
    allow_append: bool = False,
    strategy: str = "exhaustive",
    **strategy_kwargs: Any,
) -> List[Solution]:
    """
    Find every true equation reachable within max_moves.

    Upright solutions come first, then fewer moves first. Each resulting
    equation appears once. Returns [] if the puzzle is already true.
    """
    return solve_with_result(
        equation,
        max_moves=max_moves,
        allow_flip=allow_flip,
        allow_prepend=allow_prepend,
        allow_append=allow_append,
        strategy=strategy,
        **strategy_kwargs,
    ).solutions


__all__ = [
    "solve",
    "solve_with_result",
    "matchstick_formatter",
    "evaluate_equation",
    "EquationError",
    "BoardState",
    "Move",
    "Solution",
    "SolveResult",
]

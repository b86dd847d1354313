"""
Solver Package - Modular search framework for matchstick equations.

This package provides a pluggable strategy framework for finding every
true equation reachable from a puzzle by moving matchsticks. Strategies
can be selected at runtime by name.

Public API:
    - BoardState: Immutable bit-board representation
    - Slot: Matchstick positions within a character cell
    - Move: One matchstick moved from one slot to another
    - Solution: A true equation with the moves that produce it
    - SolveResult: Solutions plus metrics and cancellation state
    - SolutionMetrics: Performance statistics
    - SolutionContext: Shared context for strategies
    - SolutionLookup: Precomputed solutions loaded from a JSON file
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from matchstick.solver import create_strategy, SolutionContext

    # Create context with cancellation support
    context = SolutionContext(equation="5+7=2", max_moves=1)

    # Create and run strategy
    strategy = create_strategy("exhaustive")
    result = strategy.solve(context)

    # Access results
    for solution in result.solutions:
        print(solution.equation, [move.describe() for move in solution.moves])
"""

# Core data structures
from .slots import Slot
from .board import BoardState
from .move import Move
from .solution import Solution, SolutionMetrics, SolveResult
from .context import SolutionContext
from .lookup import LookupFileError, SolutionLookup

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "Slot",
    "BoardState",
    "Move",
    "Solution",
    "SolutionMetrics",
    "SolveResult",
    "SolutionContext",
    "SolutionLookup",
    "LookupFileError",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]

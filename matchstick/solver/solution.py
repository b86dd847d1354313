"""
Solution Module - Solved equations and the result of a strategy computation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .move import Move


@dataclass(frozen=True)
class Solution:
    """
    A true equation reachable from the puzzle.

    Attributes:
        equation: Resulting equation (normalized)
        moves: Matchstick moves from the puzzle to the result
        flipped: True if the board has to be turned upside down
    """
    equation: str
    moves: Tuple[Move, ...] = ()
    flipped: bool = False

    @property
    def move_count(self) -> int:
        """Number of matchsticks moved."""
        return len(self.moves)

    def sort_key(self) -> Tuple[bool, int, Tuple[Move, ...]]:
        """Presentation order: upright first, then fewer moves."""
        return (self.flipped, len(self.moves), self.moves)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the lookup cache."""
        return {
            "equation": self.equation,
            "moves": [move.to_dict() for move in self.moves],
            "flipped": self.flipped,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Solution':
        """Inverse of to_dict()."""
        return cls(
            equation=data["equation"],
            moves=tuple(Move.from_dict(move) for move in data.get("moves", [])),
            flipped=bool(data.get("flipped", False)),
        )


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of distinct search states visited
        candidates_checked: Number of candidate equations sent to the oracle
        strategy_name: Name of strategy that computed this result
        cache_hit: True if the answer came from the lookup cache
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    candidates_checked: int = 0
    strategy_name: str = ""
    cache_hit: bool = False


@dataclass
class SolveResult:
    """
    Result of a strategy computation.

    Attributes:
        equation: Normalized puzzle equation
        solutions: Solutions in presentation order
        was_cancelled: True if stopped before completion (solutions partial)
        already_solved: True if the puzzle was already a true equation
        metrics: Performance statistics
    """
    equation: str
    solutions: List[Solution] = field(default_factory=list)
    was_cancelled: bool = False
    already_solved: bool = False
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def solution_count(self) -> int:
        """Number of solutions found."""
        return len(self.solutions)

    @property
    def has_solutions(self) -> bool:
        """Check if any solution was found."""
        return len(self.solutions) > 0

    def get_solution(self, index: int) -> Solution:
        """
        Get solution at specific index.

        Raises:
            IndexError: If index out of range
        """
        return self.solutions[index]

    def equations(self) -> List[str]:
        """Resulting equations in presentation order."""
        return [solution.equation for solution in self.solutions]

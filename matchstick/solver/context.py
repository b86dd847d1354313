"""
Solution Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import normalize_equation


@dataclass
class SolutionContext:
    """
    Shared context passed to strategies containing the puzzle, search
    options, cancellation, and progress reporting.

    Attributes:
        equation: Puzzle equation as entered
        max_moves: Move budget
        allow_flip: Also read every reachable board upside down
        allow_prepend: Allow building a new leading character
        allow_append: Allow building a new trailing character
        flip_between_moves: Allow turning the board over during a move
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = no limit)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    equation: str
    max_moves: int = 1
    allow_flip: bool = True
    allow_prepend: bool = False
    allow_append: bool = False
    flip_between_moves: bool = False
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    @property
    def normalized_equation(self) -> str:
        """Equation without whitespace and with 'x' for multiplication."""
        return normalize_equation(self.equation)

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def cancel(self) -> None:
        """Request cancellation from another thread."""
        self.cancel_flag.set()

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.time() - self.start_time

    def remaining_time(self) -> Optional[float]:
        """
        Get seconds remaining before timeout.

        Returns:
            Remaining time in seconds (may be negative if exceeded),
            or None without a timeout
        """
        if self.timeout_sec is None:
            return None
        return self.timeout_sec - self.elapsed_time()

"""
Lookup Strategy - Precomputed answers in front of the search engine.
"""

import time
import logging
from pathlib import Path
from typing import Optional, Union

from ..base import SolverStrategy
from ..context import SolutionContext
from ..lookup import DEFAULT_LOOKUP_PATH, SolutionLookup
from ..solution import SolveResult
from ..factory import create_strategy, register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class LookupStrategy(SolverStrategy):
    """
    Answers from a SolutionLookup file, searching only on a miss.

    The cache only holds upright-or-flipped answers without padding, so
    prepend/append and mid-move flips always go to the fallback strategy.
    """
    name = "lookup"
    description = "Lookup (instant on hit) - Precomputed answers, search on miss"

    def __init__(self, lookup: Optional[SolutionLookup] = None,
                 path: Optional[Union[str, Path]] = None,
                 fallback: str = "exhaustive"):
        """
        Initialize lookup strategy.

        Args:
            lookup: Existing lookup to share between strategies
            path: Lookup file to open when no lookup is given
            fallback: Strategy used on a cache miss
        """
        if lookup is None:
            lookup = SolutionLookup(path if path is not None else DEFAULT_LOOKUP_PATH)
        self.lookup = lookup
        self.fallback = create_strategy(fallback)

    def solve(self, context: SolutionContext) -> SolveResult:
        """
        Return cached solutions, or delegate to the fallback strategy.

        Args:
            context: Solution context with puzzle, options and cancellation

        Returns:
            SolveResult with solutions and metrics
        """
        start_time = time.perf_counter()

        if context.allow_prepend or context.allow_append or context.flip_between_moves:
            logger.debug("[Lookup] Options not cacheable, using fallback")
            return self.fallback.solve(context)

        if self._already_solved(context):
            return self._build_result(context, [], start_time, already_solved=True)

        cached = self.lookup.lookup(
            context.normalized_equation, context.max_moves, context.allow_flip
        )
        if cached is None:
            logger.info(f"[Lookup] Miss for {context.normalized_equation}, searching")
            return self.fallback.solve(context)

        logger.info(f"[Lookup] Hit for {context.normalized_equation}: {len(cached)} solutions")
        return self._build_result(context, cached, start_time, cache_hit=True)

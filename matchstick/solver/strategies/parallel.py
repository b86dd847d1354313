"""
Parallel Strategy - Top-level branches of the search sharded over processes.

The successors of the puzzle board are split into shards; every shard is
explored in a worker process with its own visited set and the results are
merged before ranking. The union of the shards is exactly the set the
single-threaded search reaches, so the solutions are identical; some
states may be explored in more than one shard.
"""

import os
import time
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional

from ..base import SolverStrategy
from ..board import BoardState
from ..context import SolutionContext
from ..mutations import generate_mutations
from ..ranker import SolutionRanker
from ..search import SearchResult, SearchState, explore_from
from ..solution import SolveResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class ParallelStrategy(SolverStrategy):
    """
    Exhaustive search with the first move level distributed over workers.

    Worth it for move budgets of 2 and more; for a single move the process
    start-up dominates.

    Cancellation is checked whenever a shard completes; a running shard is
    not interrupted.
    """
    name = "parallel"
    description = "Parallel - Exhaustive search sharded over worker processes"

    def __init__(self, workers: Optional[int] = None):
        """
        Initialize parallel strategy.

        Args:
            workers: Number of worker processes (default: CPU count)
        """
        self.workers = max(1, workers or os.cpu_count() or 1)

    def solve(self, context: SolutionContext) -> SolveResult:
        """
        Compute all solutions with the search sharded over processes.

        Args:
            context: Solution context with puzzle, options and cancellation

        Returns:
            SolveResult with solutions and metrics
        """
        start_time = time.perf_counter()

        if self._already_solved(context):
            return self._build_result(context, [], start_time, already_solved=True)

        options = self.search_options(context)
        initial = options.pad(BoardState.from_equation(context.normalized_equation).bits)
        result = SearchResult(initial=initial, states=[SearchState(initial, 0, False)])

        roots = self._first_level(initial, context) if options.max_depth > 0 else []
        result.states_generated = len(roots)
        shards = [roots[i::self.workers] for i in range(self.workers) if roots[i::self.workers]]

        if shards:
            logger.debug(
                f"[Parallel] {len(roots)} first-level boards over {len(shards)} shards"
            )
            with ProcessPoolExecutor(max_workers=len(shards)) as executor:
                futures = [
                    executor.submit(explore_from, shard, initial, options)
                    for shard in shards
                ]
                for done, future in enumerate(as_completed(futures), start=1):
                    result = result.merge(future.result())
                    context.report_progress(
                        0.8 * done / len(futures), f"{done}/{len(futures)} shards"
                    )
                    if self._check_cancelled(context):
                        for pending in futures:
                            pending.cancel()
                        result.was_cancelled = True
                        break

        ranker = SolutionRanker(
            context.normalized_equation,
            allow_flip=context.allow_flip,
            position_offset=options.position_offset,
        )
        solutions = ranker.rank(result)
        context.report_progress(1.0, f"{len(solutions)} solution(s)")

        logger.info(
            f"[Parallel] {context.normalized_equation}: {len(solutions)} solutions, "
            f"{len(result.states)} states explored with {len(shards)} shards"
        )

        return self._build_result(
            context,
            solutions,
            start_time,
            states_explored=len(result.states),
            candidates_checked=ranker.candidates_checked,
            was_cancelled=result.was_cancelled,
        )

    def _first_level(self, initial, context: SolutionContext) -> List[SearchState]:
        """Distinct depth-1 states, in generation order."""
        seen = set()
        roots = []
        mutations = generate_mutations(
            initial,
            remaining=context.max_moves,
            allow_flip=context.flip_between_moves,
            prepend_index=0 if context.allow_prepend else None,
        )
        for mutation in mutations:
            state = SearchState(mutation.bits, 1, mutation.flipped)
            if state not in seen:
                seen.add(state)
                roots.append(state)
        return roots

"""
Greedy Best-First Strategy - Always expands the board that looks closest.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import SearchResult
from ..factory import register_strategy


@register_strategy
class GreedyBestFirstStrategy(SolverStrategy):
    """
    Greedy best-first search ordered by heuristic h alone.

    Usually the fastest strategy, since it ignores how many moves were
    already spent. Solutions are not guaranteed to be shortest.
    """
    name = "greedy"
    description = "Greedy Best-First (fast) - Expands lowest heuristic first"
    uses_heuristic = True

    def solve(self, context: SolutionContext) -> SearchResult:
        return self._best_first_search(context, priority=lambda node: node.h)

"""
Uniform Cost Strategy - Expands boards in order of moves taken.
"""

from ..base import SolverStrategy
from ..context import SolutionContext
from ..solution import SearchResult
from ..factory import register_strategy


@register_strategy
class UniformCostStrategy(SolverStrategy):
    """
    Uniform cost search ordered by path cost g.

    Every move costs 1, so this finds a solution with the fewest moves
    (under the chosen move model). Frontier ties pop in insertion order.
    """
    name = "ucs"
    description = "Uniform Cost (optimal) - Expands cheapest path first"

    def solve(self, context: SolutionContext) -> SearchResult:
        return self._best_first_search(context, priority=lambda node: node.g)

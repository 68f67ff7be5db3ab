"""
A* Strategy - Best-first search on moves taken plus heuristic estimate.
"""

import heapq
import itertools
import time
from typing import Dict, List, Set, Tuple

from ..base import SolverStrategy
from ..context import SolutionContext
from ..heuristics import INFINITY, Estimate
from ..node import SearchNode
from ..solution import SearchResult
from ..factory import register_strategy


@register_strategy
class AStarStrategy(SolverStrategy):
    """
    A* search ordered by f = g + h, ties broken by lower h.

    Optimal when the heuristic never overestimates the remaining moves.
    Manhattan, direct distance and blocking count are admissible with
    one-cell moves; clearing moves is not. A frontier entry is replaced
    only when a strictly better f is found for the same state, and
    successors with an infinite estimate are dropped since they can
    never reach the exit.
    """
    name = "astar"
    description = "A* (optimal with admissible heuristic) - Expands lowest g + h"
    uses_heuristic = True

    def solve(self, context: SolutionContext) -> SearchResult:
        start_time = time.perf_counter()
        counter = itertools.count()

        root = SearchNode(board=context.board, h=self.evaluate(context.board))
        best_f: Dict[str, Estimate] = {root.key: root.f}
        frontier: List[Tuple[Estimate, Estimate, int, SearchNode]] = [
            (root.f, root.h, next(counter), root)
        ]
        closed: Set[str] = set()
        states_examined = 0
        nodes_generated = 0

        while frontier:
            if self._check_cancelled(context, states_examined):
                return self._build_result(
                    None, states_examined, nodes_generated, start_time, was_cancelled=True
                )

            f, _, _, node = heapq.heappop(frontier)
            if node.key in closed or f > best_f[node.key]:
                continue

            closed.add(node.key)
            states_examined += 1
            self._report_progress(context, states_examined)

            if node.board.is_solved():
                return self._build_result(node, states_examined, nodes_generated, start_time)

            for move, board in self.expand(node.board):
                key = board.state_key()
                if key in closed:
                    continue
                child = node.child(move, board, self.evaluate(board))
                nodes_generated += 1
                if child.f < best_f.get(key, INFINITY):
                    best_f[key] = child.f
                    heapq.heappush(frontier, (child.f, child.h, next(counter), child))

        return self._build_result(None, states_examined, nodes_generated, start_time)

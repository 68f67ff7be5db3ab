"""
IDA* Strategy - Iterative deepening on f = g + h.

Runs repeated depth-first searches, each bounded by an f threshold.
The first threshold is h of the initial board; every later threshold is
the smallest f that exceeded the previous one. The depth-first pass uses
an explicit stack, so solution depth is not limited by the interpreter's
recursion limit.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterator, List, Set, Tuple, Union

from ..base import SolverStrategy
from ..board import Board
from ..context import SolutionContext
from ..heuristics import INFINITY
from ..move import Move
from ..node import SearchNode
from ..solution import SearchResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)


# Returned by the depth-first pass when the context asks to stop
_CANCELLED = object()


@dataclass
class _Counters:
    states_examined: int = 0
    nodes_generated: int = 0


@register_strategy
class IDAStarStrategy(SolverStrategy):
    """
    Iterative deepening A*.

    Within one iteration a state already on the current path is never
    re-entered, and a state reached again with no fewer moves than
    before is skipped. Both sets reset between iterations.

    An iteration that goal-tests every state whose f it rejected has
    covered the whole reachable space, so raising the threshold again
    could not find anything new and the board has no solution. States
    with an infinite estimate are provably dead and do not count.
    """
    name = "ida_star"
    description = "IDA* (optimal, low memory) - Iterative deepening on g + h"
    uses_heuristic = True

    def solve(self, context: SolutionContext) -> SearchResult:
        start_time = time.perf_counter()
        counters = _Counters()

        root = SearchNode(board=context.board, h=self.evaluate(context.board))
        if root.h == INFINITY:
            return self._build_result(None, 1, 0, start_time, iterations=1)

        threshold = root.f
        iterations = 0
        while True:
            iterations += 1
            result = self._bounded_search(context, root, threshold, counters)

            if isinstance(result, SearchNode):
                return self._build_result(
                    result, counters.states_examined, counters.nodes_generated,
                    start_time, iterations=iterations
                )
            if result is _CANCELLED:
                return self._build_result(
                    None, counters.states_examined, counters.nodes_generated,
                    start_time, was_cancelled=True, iterations=iterations
                )
            if result == INFINITY:
                return self._build_result(
                    None, counters.states_examined, counters.nodes_generated,
                    start_time, iterations=iterations
                )

            logger.debug(f"[ida_star] Iteration {iterations}: threshold {threshold} -> {result}")
            threshold = result

    def _bounded_search(
        self,
        context: SolutionContext,
        root: SearchNode,
        threshold: float,
        counters: _Counters,
    ) -> Union[SearchNode, float, object]:
        """
        One depth-first pass bounded by threshold.

        Returns:
            The goal node, _CANCELLED, the smallest rejected f, or INFINITY
            when no unexplored state remains
        """
        on_path: Set[str] = {root.key}
        best_g: Dict[str, int] = {root.key: 0}
        tested: Set[str] = set()
        rejected: Set[str] = set()
        minimum = INFINITY

        if self._check_cancelled(context, counters.states_examined):
            return _CANCELLED
        counters.states_examined += 1
        tested.add(root.key)
        self._report_progress(context, counters.states_examined)
        if root.board.is_solved():
            return root

        stack: List[Tuple[SearchNode, Iterator[Tuple[Move, Board]]]] = [
            (root, iter(self.expand(root.board)))
        ]
        while stack:
            node, successors = stack[-1]
            step = next(successors, None)
            if step is None:
                stack.pop()
                on_path.discard(node.key)
                continue

            move, board = step
            key = board.state_key()
            if key in on_path:
                continue
            g = node.g + 1
            if best_g.get(key, INFINITY) <= g:
                continue
            best_g[key] = g

            child = node.child(move, board, self.evaluate(board))
            counters.nodes_generated += 1

            if child.f > threshold:
                minimum = min(minimum, child.f)
                if child.h != INFINITY:
                    rejected.add(key)
                continue

            if self._check_cancelled(context, counters.states_examined):
                return _CANCELLED
            counters.states_examined += 1
            tested.add(key)
            self._report_progress(context, counters.states_examined)

            if board.is_solved():
                return child

            on_path.add(key)
            stack.append((child, iter(self.expand(board))))

        if rejected <= tested:
            return INFINITY
        return minimum

"""
Base Strategy Module - Abstract base class for search strategies.
"""

import heapq
import itertools
import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Set, Tuple, Union

from .board import Board
from .context import SolutionContext
from .heuristics import Estimate, Heuristic, resolve
from .move import Move
from .node import SearchNode, reconstruct_solution
from .solution import SearchResult, SolutionMetrics

logger = logging.getLogger(__name__)


# Report progress every this many examined states
PROGRESS_INTERVAL = 5000


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes. Strategies keep no state
    between calls: every solve() builds its own frontier, visited set
    and node graph, so one instance can serve several threads.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for UI
        uses_heuristic: Whether the strategy orders nodes by a heuristic
    """
    name: str = "base"
    description: str = "Base strategy"
    uses_heuristic: bool = False

    def __init__(self, heuristic: Optional[Union[Heuristic, str]] = None,
                 compound_moves: bool = False):
        """
        Initialize strategy.

        Args:
            heuristic: Heuristic for informed strategies (default Manhattan)
            compound_moves: Generate maximal multi-cell slides instead of
                            one-cell moves; either way every move costs 1
        """
        if self.uses_heuristic:
            self.heuristic: Optional[Heuristic] = resolve(heuristic)
        elif heuristic is not None:
            raise ValueError(f"Strategy '{self.name}' does not use a heuristic")
        else:
            self.heuristic = None
        self.compound_moves = compound_moves

    @abstractmethod
    def solve(self, context: SolutionContext) -> SearchResult:
        """
        Search for a solution starting from context.board.

        Must periodically check context.is_cancelled() and return
        an unsolved, cancelled result if True.

        Args:
            context: Solution context with board, limits and progress

        Returns:
            SearchResult with the solution (or None) and metrics
        """
        pass

    def expand(self, board: Board) -> List[Tuple[Move, Board]]:
        """
        Generate successors of a board.

        Args:
            board: Board to expand

        Returns:
            (move, resulting board) pairs
        """
        moves = board.compound_moves() if self.compound_moves else board.legal_moves()
        return [(move, board.make_move(move)) for move in moves]

    def evaluate(self, board: Board) -> Estimate:
        """Heuristic estimate for a board, 0 for uninformed strategies."""
        if self.heuristic is None:
            return 0
        return self.heuristic.evaluate(board)

    def _check_cancelled(self, context: SolutionContext, states_examined: int) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Solution context
            states_examined: States examined so far

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled(states_examined)

    def _report_progress(self, context: SolutionContext, states_examined: int) -> None:
        if states_examined % PROGRESS_INTERVAL == 0:
            context.report_progress(states_examined, f"{states_examined} states examined")

    def _best_first_search(
        self,
        context: SolutionContext,
        priority: Callable[[SearchNode], Estimate],
    ) -> SearchResult:
        """
        Shared frontier loop for strategies that differ only in node ordering.

        Pops the lowest-priority node, skips states already visited,
        goal-tests, then pushes every successor whose state is unvisited.

        Args:
            context: Solution context
            priority: Key to order the frontier by (lower pops first)

        Returns:
            SearchResult
        """
        start_time = time.perf_counter()
        counter = itertools.count()

        root = SearchNode(board=context.board, h=self.evaluate(context.board))
        frontier: List[Tuple[Estimate, int, SearchNode]] = [(priority(root), next(counter), root)]
        visited: Set[str] = set()
        states_examined = 0
        nodes_generated = 0

        while frontier:
            if self._check_cancelled(context, states_examined):
                return self._build_result(
                    None, states_examined, nodes_generated, start_time, was_cancelled=True
                )

            _, _, node = heapq.heappop(frontier)
            if node.key in visited:
                continue

            visited.add(node.key)
            states_examined += 1
            self._report_progress(context, states_examined)

            if node.board.is_solved():
                return self._build_result(node, states_examined, nodes_generated, start_time)

            for move, board in self.expand(node.board):
                if board.state_key() in visited:
                    continue
                child = node.child(move, board, self.evaluate(board))
                nodes_generated += 1
                heapq.heappush(frontier, (priority(child), next(counter), child))

        return self._build_result(None, states_examined, nodes_generated, start_time)

    def _build_result(
        self,
        goal: Optional[SearchNode],
        states_examined: int,
        nodes_generated: int,
        start_time: float,
        was_cancelled: bool = False,
        iterations: int = 0,
    ) -> SearchResult:
        """Build SearchResult object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        solution = reconstruct_solution(goal, states_examined) if goal is not None else None
        if solution is not None:
            logger.info(
                f"[{self.name}] Solution found: {solution.move_count} moves, "
                f"{states_examined} states examined in {elapsed_ms:.1f}ms"
            )
        elif was_cancelled:
            logger.info(f"[{self.name}] Cancelled after {states_examined} states")
        else:
            logger.info(f"[{self.name}] No solution found, {states_examined} states examined")

        return SearchResult(
            solution=solution,
            was_cancelled=was_cancelled,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                states_examined=states_examined,
                nodes_generated=nodes_generated,
                iterations=iterations,
                strategy_name=self.name,
                heuristic_name=self.heuristic.value if self.heuristic else "",
            ),
        )

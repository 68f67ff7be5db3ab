"""
Solver Module - One-call entry points for each search strategy.

Each function builds the strategy, wraps the board in a SolutionContext
when the caller did not supply one, and runs a single search.
"""

import logging
from dataclasses import replace
from typing import Any, Optional, Union

from .board import Board
from .context import SolutionContext
from .factory import create_strategy, get_default_strategy_name
from .heuristics import Heuristic
from .solution import SearchResult
from .strategies.beam_search import DEFAULT_BEAM_WIDTH

logger = logging.getLogger(__name__)

HeuristicLike = Optional[Union[Heuristic, str]]


def _make_context(board: Board, context: Optional[SolutionContext]) -> SolutionContext:
    if context is None:
        return SolutionContext(board=board)
    if context.board is board:
        return context
    # Same cancel flag and limits, different starting board
    return replace(context, board=board)


def solve(board: Board, strategy: str = "", **options: Any) -> SearchResult:
    """
    Solve a board with a strategy chosen by name.

    Args:
        board: Initial board
        strategy: Registered strategy name (default "astar")
        **options: Strategy constructor arguments, plus an optional
                   'context' for cancellation, limits and progress

    Returns:
        SearchResult

    Raises:
        ValueError: If the strategy or heuristic name is unknown
    """
    name = strategy or get_default_strategy_name()
    context = _make_context(board, options.pop("context", None))
    solver = create_strategy(name, **options)
    logger.debug(f"Solving {board.height}x{board.width} board with {name}")
    return solver.solve(context)


def solve_ucs(board: Board, compound_moves: bool = False,
              context: Optional[SolutionContext] = None) -> SearchResult:
    """Uniform cost search; shortest solution."""
    return solve(board, "ucs", compound_moves=compound_moves, context=context)


def solve_dijkstra(board: Board, compound_moves: bool = False,
                   context: Optional[SolutionContext] = None) -> SearchResult:
    """Dijkstra's algorithm; shortest solution."""
    return solve(board, "dijkstra", compound_moves=compound_moves, context=context)


def solve_greedy(board: Board, heuristic: HeuristicLike = None, compound_moves: bool = False,
                 context: Optional[SolutionContext] = None) -> SearchResult:
    """Greedy best-first search; fast, not necessarily shortest."""
    return solve(board, "greedy", heuristic=heuristic,
                 compound_moves=compound_moves, context=context)


def solve_astar(board: Board, heuristic: HeuristicLike = None, compound_moves: bool = False,
                context: Optional[SolutionContext] = None) -> SearchResult:
    """A* search; shortest solution when the heuristic is admissible."""
    return solve(board, "astar", heuristic=heuristic,
                 compound_moves=compound_moves, context=context)


def solve_beam(board: Board, heuristic: HeuristicLike = None, compound_moves: bool = False,
               beam_width: int = DEFAULT_BEAM_WIDTH,
               context: Optional[SolutionContext] = None) -> SearchResult:
    """
    Beam search keeping beam_width successors per depth layer.

    May return no solution for a solvable board.
    """
    return solve(board, "beam", heuristic=heuristic, compound_moves=compound_moves,
                 beam_width=beam_width, context=context)


def solve_ida_star(board: Board, heuristic: HeuristicLike = None, compound_moves: bool = False,
                   context: Optional[SolutionContext] = None) -> SearchResult:
    """Iterative deepening A*; shortest solution when the heuristic is admissible."""
    return solve(board, "ida_star", heuristic=heuristic,
                 compound_moves=compound_moves, context=context)

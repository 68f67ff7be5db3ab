"""
Rush Hour Package - Search framework for the Rush Hour sliding-block puzzle.

This package provides an immutable board model and a pluggable strategy
framework for finding a move sequence that drives the primary piece 'P'
out through the exit. Strategies can be selected at runtime by name.

Public API:
    - Board: Immutable board with move generation and goal test
    - Piece / Position: Board geometry
    - Move / CompoundMove: One-cell and multi-cell slides
    - Heuristic: Distance estimates for informed strategies
    - Solution / SearchResult / SolutionMetrics: Search outcome
    - SolutionContext: Cancellation, limits and progress for a search
    - SolverStrategy: Abstract base for strategies
    - create_strategy(): Factory function
    - solve(), solve_astar(), ...: One-call entry points

Usage:
    from src.rushhour import Board, solve_astar

    board = Board.from_rows(["..B", "PPB", "..."], exit_position=(1, 3))
    result = solve_astar(board, heuristic="manhattan")

    if result.found:
        print(result.solution.describe_moves())
    print(f"{result.states_examined} states examined")
"""

# Core data structures
from .position import Position
from .piece import Orientation, Piece, PRIMARY_ID, EXIT_GLYPH
from .move import Move, CompoundMove
from .board import Board, ExitSide, EMPTY
from .errors import (
    BoardConstructionError,
    BoardShapeError,
    InvalidGlyphError,
    InvalidPieceError,
    MissingPrimaryPieceError,
    PieceCountMismatchError,
    InvalidExitError,
)
from .heuristics import (
    Heuristic,
    INFINITY,
    manhattan_distance,
    direct_distance,
    blocking_count,
    clearing_moves,
)
from .solution import Solution, SolutionMetrics, SearchResult
from .context import SolutionContext
from .node import SearchNode

# Strategy framework
from .base import SolverStrategy, PROGRESS_INTERVAL
from .factory import (
    create_strategy,
    get_strategy_class,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .solver import (
    solve,
    solve_ucs,
    solve_dijkstra,
    solve_greedy,
    solve_astar,
    solve_beam,
    solve_ida_star,
)

__all__ = [
    # Data structures
    "Position",
    "Orientation",
    "Piece",
    "PRIMARY_ID",
    "EXIT_GLYPH",
    "Move",
    "CompoundMove",
    "Board",
    "ExitSide",
    "EMPTY",
    "Heuristic",
    "INFINITY",
    "manhattan_distance",
    "direct_distance",
    "blocking_count",
    "clearing_moves",
    "Solution",
    "SolutionMetrics",
    "SearchResult",
    "SolutionContext",
    "SearchNode",
    # Errors
    "BoardConstructionError",
    "BoardShapeError",
    "InvalidGlyphError",
    "InvalidPieceError",
    "MissingPrimaryPieceError",
    "PieceCountMismatchError",
    "InvalidExitError",
    # Strategy framework
    "SolverStrategy",
    "PROGRESS_INTERVAL",
    "create_strategy",
    "get_strategy_class",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    # Entry points
    "solve",
    "solve_ucs",
    "solve_dijkstra",
    "solve_greedy",
    "solve_astar",
    "solve_beam",
    "solve_ida_star",
]

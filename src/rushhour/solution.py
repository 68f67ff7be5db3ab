"""
Solution Module - Result of a search: move list, board states and metrics.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .move import Move


@dataclass
class SolutionMetrics:
    """
    Performance metrics for a single search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_examined: Distinct states taken off the frontier and goal-tested
        nodes_generated: Successor boards created during expansion
        iterations: Threshold rounds (IDA*) or depth layers (beam); 0 otherwise
        strategy_name: Name of strategy that ran the search
        heuristic_name: Heuristic used, empty for uninformed strategies
    """
    computation_time_ms: float = 0.0
    states_examined: int = 0
    nodes_generated: int = 0
    iterations: int = 0
    strategy_name: str = ""
    heuristic_name: str = ""


@dataclass
class Solution:
    """
    Moves that lead from the initial board to a solved board.

    states[0] is the initial board and states[i + 1] is the board after
    moves[i], so there is always one more state than there are moves.

    Attributes:
        moves: Ordered moves to execute
        states: Board after each move, starting with the initial board
        states_examined: Search effort spent finding this solution
    """
    moves: List[Move] = field(default_factory=list)
    states: List[Board] = field(default_factory=list)
    states_examined: int = 0

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if solution has any moves."""
        return len(self.moves) > 0

    @property
    def initial_board(self) -> Board:
        return self.states[0]

    @property
    def final_board(self) -> Board:
        return self.states[-1]

    def get_move(self, index: int) -> Move:
        """
        Get move at specific index.

        Raises:
            IndexError: If index out of range
        """
        return self.moves[index]

    def get_board_after_move(self, index: int) -> Board:
        """
        Get board state after executing move at index.

        Args:
            index: Move index (0-based)

        Returns:
            Board after move (index+1 in states)

        Raises:
            IndexError: If index out of range
        """
        return self.states[index + 1]

    def describe_moves(self) -> str:
        """Compact move sequence, e.g. 'B-DOWN P-RIGHT(3)'."""
        return " ".join(str(move) for move in self.moves)


@dataclass
class SearchResult:
    """
    Outcome of running a strategy.

    A search that exhausts its frontier without reaching the goal is not
    an error: solution is None and the metrics still report the effort.

    Attributes:
        solution: Solution found, or None
        metrics: Performance statistics
        was_cancelled: True if stopped early by cancellation, timeout or state cap
    """
    solution: Optional[Solution] = None
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)
    was_cancelled: bool = False

    @property
    def found(self) -> bool:
        """True if a solution was found."""
        return self.solution is not None

    @property
    def states_examined(self) -> int:
        """States examined, available whether or not a solution was found."""
        return self.metrics.states_examined

"""
Search Node Module - Parent-linked nodes and solution reconstruction.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from .board import Board
from .heuristics import Estimate
from .move import Move
from .solution import Solution


@dataclass(frozen=True)
class SearchNode:
    """
    Board reached during search, linked back to the node it came from.

    Attributes:
        board: Board at this node
        move: Move that produced the board (None at the root)
        parent: Previous node (None at the root)
        g: Moves taken from the root
        h: Heuristic estimate of moves remaining (0 for uninformed search)
    """
    board: Board
    move: Optional[Move] = None
    parent: Optional['SearchNode'] = None
    g: int = 0
    h: Estimate = 0

    @property
    def f(self) -> Union[int, float]:
        """Estimated total cost through this node."""
        return self.g + self.h

    @property
    def depth(self) -> int:
        """Moves from the root; equal to g since every move costs 1."""
        return self.g

    @property
    def key(self) -> str:
        return self.board.state_key()

    def child(self, move: Move, board: Board, h: Estimate = 0) -> 'SearchNode':
        """Create the successor reached by applying move (each move costs 1)."""
        return SearchNode(board=board, move=move, parent=self, g=self.g + 1, h=h)


def reconstruct_solution(goal: SearchNode, states_examined: int) -> Solution:
    """
    Walk parent links from the goal back to the root.

    Args:
        goal: Node holding a solved board
        states_examined: Search effort to record on the solution

    Returns:
        Solution with moves in forward order and states[0] = initial board
    """
    moves: List[Move] = []
    states: List[Board] = []

    node: Optional[SearchNode] = goal
    while node is not None:
        states.append(node.board)
        if node.move is not None:
            moves.append(node.move)
        node = node.parent

    moves.reverse()
    states.reverse()
    return Solution(moves=moves, states=states, states_examined=states_examined)

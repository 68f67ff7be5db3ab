"""
Heuristics Module - Estimates of remaining work for informed search.

Every evaluator maps a Board to a non-negative number. INFINITY marks
boards where the estimate is undefined (no primary piece, no exit, or a
layout the evaluator can prove hopeless). A solved board always scores 0.

With single-cell moves manhattan_distance, direct_distance and
blocking_count never overestimate, and each changes by at most one per
move. With compound moves one move may cover several cells, so only
blocking_count stays admissible. clearing_moves is not admissible.
"""

import math
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from .board import EMPTY, Board, ExitSide
from .piece import Orientation, Piece
from .position import Position


INFINITY = math.inf

Estimate = Union[int, float]


def manhattan_distance(board: Board) -> Estimate:
    """Minimum taxicab distance from any primary cell to the exit cell."""
    primary = board.primary
    target = board.exit_cell
    if primary is None or target is None:
        return INFINITY
    if board.is_solved():
        return 0
    return min(cell.manhattan(target) for cell in primary.cells)


def direct_distance(board: Board) -> Estimate:
    """Cells between the primary's leading end and the exit border, along the exit axis."""
    primary = board.primary
    target = board.exit_cell
    if primary is None or target is None:
        return INFINITY
    if primary.orientation is not board.exit_side.orientation:
        return INFINITY
    if board.is_solved():
        return 0

    side = board.exit_side
    if side is ExitSide.RIGHT:
        return target.col - primary.front.col
    if side is ExitSide.LEFT:
        return primary.back.col - target.col
    if side is ExitSide.BOTTOM:
        return target.row - primary.front.row
    return primary.back.row - target.row


def blocking_count(board: Board) -> Estimate:
    """Number of distinct pieces sitting between the primary and the exit."""
    primary = board.primary
    if primary is None or board.exit_cell is None:
        return INFINITY
    if primary.orientation is not board.exit_side.orientation:
        return INFINITY
    if board.is_solved():
        return 0
    return len(_blockers(board, primary))


def clearing_moves(board: Board) -> Estimate:
    """
    Direct distance plus the cells each blocker must slide to free the path.

    A blocker perpendicular to the corridor can leave it by retreating
    (moving back until its front end passes the lane) or advancing (until
    its back end passes the lane). Each direction needs the board to have
    room for the slide; if the cells it would cross are not all empty the
    cost gets one extra move for whatever else must step aside first.
    A blocker parallel to the corridor can never leave it.
    """
    distance = direct_distance(board)
    if distance == INFINITY or distance == 0:
        return distance

    primary = board.primary
    total = distance
    for blocker in _blockers(board, primary):
        cost = _clearing_cost(board, blocker, primary.lane)
        if cost == INFINITY:
            return INFINITY
        total += cost
    return total


def _corridor(board: Board, primary: Piece) -> List[Position]:
    """Cells strictly between the primary's leading end and the exit border."""
    target = board.exit_cell
    side = board.exit_side
    lane = primary.lane

    if side is ExitSide.RIGHT:
        return [Position(lane, col) for col in range(primary.front.col + 1, target.col + 1)]
    if side is ExitSide.LEFT:
        return [Position(lane, col) for col in range(target.col, primary.back.col)]
    if side is ExitSide.BOTTOM:
        return [Position(row, lane) for row in range(primary.front.row + 1, target.row + 1)]
    return [Position(row, lane) for row in range(target.row, primary.back.row)]


def _blockers(board: Board, primary: Piece) -> List[Piece]:
    seen: Dict[str, Piece] = {}
    for cell in _corridor(board, primary):
        glyph = board.cell(cell.row, cell.col)
        if glyph is None or glyph == primary.piece_id or glyph in seen:
            continue
        piece = board.get_piece(glyph)
        if piece is not None:
            seen[glyph] = piece
    return list(seen.values())


def _clearing_cost(board: Board, blocker: Piece, lane: int) -> Estimate:
    if blocker.orientation is board.exit_side.orientation:
        return INFINITY

    # Index along the blocker's own axis: rows for vertical, columns for horizontal.
    def axis_index(cell: Position) -> int:
        return cell.col if blocker.orientation is Orientation.HORIZONTAL else cell.row

    limit = board.width if blocker.orientation is Orientation.HORIZONTAL else board.height
    first = axis_index(blocker.back)
    last = axis_index(blocker.front)

    best: Estimate = INFINITY
    for direction, need in ((-1, last - lane + 1), (1, lane - first + 1)):
        end = first - need if direction < 0 else last + need
        if end < 0 or end >= limit:
            continue
        clear = _clear_run(board, blocker, direction)
        cost = need if clear >= need else need + 1
        best = min(best, cost)
    return best


def _clear_run(board: Board, piece: Piece, direction: int) -> int:
    """Number of empty on-board cells directly ahead of a piece."""
    d_row, d_col = piece.step(direction)
    cell = piece.leading_cell(direction).shifted(d_row, d_col)
    run = 0
    while board.cell(cell.row, cell.col) == EMPTY:
        run += 1
        cell = cell.shifted(d_row, d_col)
    return run


class Heuristic(Enum):
    """Closed set of heuristic evaluators available to informed strategies."""
    MANHATTAN = "manhattan"
    DIRECT = "direct"
    BLOCKING = "blocking"
    CLEARING = "clearing"

    def evaluate(self, board: Board) -> Estimate:
        """Score a board with this heuristic."""
        return _EVALUATORS[self](board)

    @property
    def label(self) -> str:
        """Human-readable name."""
        return _LABELS[self]

    @classmethod
    def parse(cls, name: Union['Heuristic', str]) -> 'Heuristic':
        """
        Resolve a heuristic from its enum member, short name or display label.

        Args:
            name: e.g. Heuristic.CLEARING, "clearing" or "Clearing Moves"

        Returns:
            Matching Heuristic

        Raises:
            ValueError: If the name is not recognised
        """
        if isinstance(name, Heuristic):
            return name
        key = name.strip().lower()
        for heuristic in cls:
            if key in (heuristic.value, heuristic.label.lower(), heuristic.name.lower()):
                return heuristic
        available = ", ".join(h.value for h in cls)
        raise ValueError(f"Unknown heuristic: {name}. Available: {available}")


_EVALUATORS: Dict[Heuristic, Callable[[Board], Estimate]] = {
    Heuristic.MANHATTAN: manhattan_distance,
    Heuristic.DIRECT: direct_distance,
    Heuristic.BLOCKING: blocking_count,
    Heuristic.CLEARING: clearing_moves,
}

_LABELS: Dict[Heuristic, str] = {
    Heuristic.MANHATTAN: "Manhattan Distance",
    Heuristic.DIRECT: "Direct Distance",
    Heuristic.BLOCKING: "Blocking Count",
    Heuristic.CLEARING: "Clearing Moves",
}


def resolve(heuristic: Optional[Union[Heuristic, str]]) -> Heuristic:
    """parse() with Manhattan distance as the default when nothing is given."""
    if heuristic is None:
        return Heuristic.MANHATTAN
    return Heuristic.parse(heuristic)

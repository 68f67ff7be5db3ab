"""
Board Module - Immutable Rush Hour puzzle state.

Exit policy: the primary piece is never removed from play. A move that
slides it through the exit keeps tracking its (now off-grid) cells and
only the on-grid part is written into the grid. The board counts as
solved once the primary's leading end reaches the border cell next to
the exit, or anything beyond it. Searches stop at the first solved
state, so solutions end with the primary touching the exit.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from functools import cached_property
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .errors import (
    BoardShapeError,
    InvalidExitError,
    InvalidGlyphError,
    MissingPrimaryPieceError,
    PieceCountMismatchError,
)
from .move import CompoundMove, Move
from .piece import EXIT_GLYPH, PRIMARY_ID, Orientation, Piece, is_piece_id
from .position import Position

logger = logging.getLogger(__name__)


EMPTY = "."

Grid = Tuple[Tuple[str, ...], ...]
PositionLike = Union[Position, Tuple[int, int]]


class ExitSide(Enum):
    """Board edge the exit sits on."""
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"

    @property
    def orientation(self) -> Optional[Orientation]:
        """Orientation a primary piece needs to leave through this side."""
        if self in (ExitSide.LEFT, ExitSide.RIGHT):
            return Orientation.HORIZONTAL
        if self in (ExitSide.TOP, ExitSide.BOTTOM):
            return Orientation.VERTICAL
        return None

    @property
    def direction(self) -> int:
        """Direction of travel toward this side (+1 right/down, -1 left/up)."""
        if self in (ExitSide.RIGHT, ExitSide.BOTTOM):
            return 1
        if self in (ExitSide.LEFT, ExitSide.TOP):
            return -1
        return 0


@dataclass(frozen=True)
class Board:
    """
    Full puzzle state.

    Instances are never mutated: make_move() returns a new Board with a
    fresh grid and piece tuple, so boards held by different search nodes
    never alias each other.

    Attributes:
        width: Number of columns
        height: Number of rows
        grid: Tuple of row tuples; each cell is EMPTY or a piece id
        pieces: All pieces, sorted by id
        exit_position: Cell one step outside the grid, or None
        exit_side: Edge the exit is on (NONE if there is no usable exit)
    """
    width: int
    height: int
    grid: Grid
    pieces: Tuple[Piece, ...]
    exit_position: Optional[Position]
    exit_side: ExitSide

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        grid: Sequence[Sequence[str]],
        exit_position: Optional[PositionLike],
        exit_side: Optional[Union[ExitSide, str]] = None,
        piece_count: Optional[int] = None,
    ) -> 'Board':
        """
        Build a Board from a parsed puzzle description.

        Args:
            width: Number of columns
            height: Number of rows
            grid: Rows of glyphs ('.' for empty, 'A'-'Z' for pieces); each
                  row may be a string or a sequence of one-char strings
            exit_position: Cell directly outside an edge, e.g. (row, width)
                           for a right-hand exit
            exit_side: Optional explicit side; derived from exit_position
                       when omitted and checked against it when given
            piece_count: Expected number of non-primary pieces, if known

        Returns:
            Validated Board

        Raises:
            BoardConstructionError: (or a subclass) describing the first
                problem found in the input
        """
        if width <= 0 or height <= 0:
            raise BoardShapeError(f"Board dimensions must be positive, got {height}x{width}")
        if width == 1 and height == 1:
            raise BoardShapeError("Board size must be at least 1x2 or 2x1")

        rows = [tuple(row) for row in grid]
        if len(rows) != height:
            raise BoardShapeError(f"Expected {height} rows but found {len(rows)}")

        cells: Dict[str, List[Position]] = {}
        for r, row in enumerate(rows):
            if len(row) != width:
                raise BoardShapeError(f"Row {r} has {len(row)} columns, expected {width}")
            for c, glyph in enumerate(row):
                if glyph == EMPTY:
                    continue
                if glyph == EXIT_GLYPH:
                    raise InvalidGlyphError(
                        f"Exit marker '{EXIT_GLYPH}' at ({r}, {c}) must lie outside the grid"
                    )
                if not is_piece_id(glyph):
                    raise InvalidGlyphError(
                        f"Invalid character {glyph!r} at ({r}, {c}). "
                        f"Only uppercase letters (A-Z) are allowed for pieces."
                    )
                cells.setdefault(glyph, []).append(Position(r, c))

        if PRIMARY_ID not in cells:
            raise MissingPrimaryPieceError(
                f"No primary piece ({PRIMARY_ID}) found in the board configuration"
            )
        pieces = tuple(Piece.from_cells(pid, positions) for pid, positions in sorted(cells.items()))

        others = len(pieces) - 1
        if piece_count is not None and others != piece_count:
            raise PieceCountMismatchError(
                f"Number of non-primary pieces mismatch. Expected {piece_count}, but found {others}"
            )

        position = _as_position(exit_position)
        side = _classify_exit(position, width, height)
        if exit_side is not None:
            try:
                requested = ExitSide(exit_side) if isinstance(exit_side, ExitSide) else ExitSide(str(exit_side).lower())
            except ValueError as e:
                raise InvalidExitError(f"Unknown exit side {exit_side!r}") from e
            if requested is not side:
                raise InvalidExitError(
                    f"Exit at {position} is on side {side.value}, not {requested.value}"
                )

        board = cls(
            width=width,
            height=height,
            grid=tuple(rows),
            pieces=pieces,
            exit_position=position,
            exit_side=side,
        )

        if not board.is_primary_aligned():
            logger.warning(
                f"Primary piece and exit {position} ({side.value}) are not aligned; "
                f"the puzzle cannot be solved"
            )
        logger.debug(
            f"Board loaded: {height}x{width}, {len(pieces)} pieces, exit {side.value} at {position}"
        )
        return board

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        exit_position: Optional[PositionLike],
        exit_side: Optional[Union[ExitSide, str]] = None,
        piece_count: Optional[int] = None,
    ) -> 'Board':
        """Build a Board from row strings, taking dimensions from the rows."""
        height = len(rows)
        width = len(rows[0]) if height > 0 else 0
        return cls.create(width, height, rows, exit_position, exit_side, piece_count)

    # ---- queries

    @cached_property
    def _pieces_by_id(self) -> Dict[str, Piece]:
        return {piece.piece_id: piece for piece in self.pieces}

    @property
    def primary(self) -> Optional[Piece]:
        """The primary piece, or None if the board has none."""
        return self._pieces_by_id.get(PRIMARY_ID)

    def get_piece(self, piece_id: str) -> Optional[Piece]:
        """Look up a piece by id."""
        return self._pieces_by_id.get(piece_id)

    def cell(self, row: int, col: int) -> Optional[str]:
        """
        Get glyph at a specific cell.

        Returns:
            Glyph, or None for coordinates outside the grid
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.grid[row][col]
        return None

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.row < self.height and 0 <= position.col < self.width

    @property
    def exit_cell(self) -> Optional[Position]:
        """Border cell adjacent to the exit; the primary's target."""
        if self.exit_position is None:
            return None
        side = self.exit_side
        if side is ExitSide.TOP:
            return Position(0, self.exit_position.col)
        if side is ExitSide.BOTTOM:
            return Position(self.height - 1, self.exit_position.col)
        if side is ExitSide.LEFT:
            return Position(self.exit_position.row, 0)
        if side is ExitSide.RIGHT:
            return Position(self.exit_position.row, self.width - 1)
        return None

    @property
    def exit_lane(self) -> Optional[int]:
        """Row of a left/right exit or column of a top/bottom exit."""
        orientation = self.exit_side.orientation
        if orientation is None or self.exit_position is None:
            return None
        if orientation is Orientation.HORIZONTAL:
            return self.exit_position.row
        return self.exit_position.col

    def is_aligned(self, piece: Piece) -> bool:
        """True if piece moves along the exit axis, in the exit's lane."""
        return (
            self.exit_side.orientation is piece.orientation
            and self.exit_lane == piece.lane
        )

    def is_primary_aligned(self) -> bool:
        """Check whether the primary piece can ever reach the exit by sliding."""
        primary = self.primary
        return primary is not None and self.is_aligned(primary)

    def state_key(self) -> str:
        """Canonical encoding (flattened grid) used for duplicate detection."""
        return self._state_key

    @cached_property
    def _state_key(self) -> str:
        return "".join("".join(row) for row in self.grid)

    def to_rows(self) -> List[str]:
        """Grid as a list of row strings."""
        return ["".join(row) for row in self.grid]

    def diff(self, other: 'Board') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this board and another.

        Args:
            other: Board of the same dimensions

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, Board):
            raise TypeError("Can only diff against another Board")
        if (self.width, self.height) != (other.width, other.height):
            raise ValueError("Boards have different dimensions")

        return [
            (r, c)
            for r in range(self.height)
            for c in range(self.width)
            if self.grid[r][c] != other.grid[r][c]
        ]

    # ---- move generation

    def legal_moves(self) -> List[Move]:
        """All one-cell slides available on this board."""
        moves = []
        for piece in self.pieces:
            for direction in (1, -1):
                if self._can_slide(piece, direction):
                    moves.append(Move(piece.piece_id, direction, piece.orientation))
        return moves

    def compound_moves(self) -> List[CompoundMove]:
        """One maximal slide per piece and direction, where any slide is possible."""
        moves = []
        for piece in self.pieces:
            for direction in (1, -1):
                distance = self.max_slide(piece, direction)
                if distance > 0:
                    moves.append(
                        CompoundMove(piece.piece_id, direction, piece.orientation, distance=distance)
                    )
        return moves

    def max_slide(self, piece: Piece, direction: int) -> int:
        """
        Count how far a piece can slide in one direction.

        For the primary piece the count stops as soon as the piece reaches
        the exit, so a compound move never travels past the goal.

        Args:
            piece: Piece on this board
            direction: +1 (right/down) or -1 (left/up)

        Returns:
            Number of cells, 0 if the piece is blocked
        """
        distance = 0
        current = piece
        # Cells the piece leaves behind are never in front of it, so the
        # board's own grid is enough to test each further step.
        while self._can_slide(current, direction):
            distance += 1
            current = current.shifted(direction)
            if current.is_primary and self._at_goal(current):
                break
        return distance

    def _can_slide(self, piece: Piece, direction: int) -> bool:
        d_row, d_col = piece.step(direction)
        target = piece.leading_cell(direction).shifted(d_row, d_col)
        if self.in_bounds(target):
            return self.grid[target.row][target.col] == EMPTY
        return piece.is_primary and self._exits_through(piece, direction)

    def _exits_through(self, piece: Piece, direction: int) -> bool:
        return self.is_aligned(piece) and direction == self.exit_side.direction

    def _at_goal(self, piece: Piece) -> bool:
        if not self.is_aligned(piece):
            return False
        side = self.exit_side
        if side is ExitSide.RIGHT:
            return piece.front.col >= self.width - 1
        if side is ExitSide.LEFT:
            return piece.back.col <= 0
        if side is ExitSide.BOTTOM:
            return piece.front.row >= self.height - 1
        if side is ExitSide.TOP:
            return piece.back.row <= 0
        return False

    def is_solved(self) -> bool:
        """True when the primary piece is at the exit or beyond it."""
        primary = self.primary
        if primary is None:
            return False
        return self._at_goal(primary)

    def make_move(self, move: Move) -> 'Board':
        """
        Apply a move and return the resulting board.

        Does not check legality; moves should come from legal_moves() or
        compound_moves(). This board is left untouched.

        Args:
            move: Move or CompoundMove to apply

        Returns:
            New Board with the piece's old cells cleared and new cells written
        """
        piece = self.get_piece(move.piece_id)
        if piece is None:
            raise ValueError(f"No piece '{move.piece_id}' on this board")

        moved = piece.shifted(move.offset)
        rows = [list(row) for row in self.grid]
        for cell in piece.cells:
            if self.in_bounds(cell):
                rows[cell.row][cell.col] = EMPTY
        for cell in moved.cells:
            if self.in_bounds(cell):
                rows[cell.row][cell.col] = moved.piece_id

        pieces = tuple(moved if p.piece_id == moved.piece_id else p for p in self.pieces)
        return replace(self, grid=tuple(tuple(row) for row in rows), pieces=pieces)

    def __str__(self) -> str:
        return "\n".join(self.to_rows())


def _as_position(value: Optional[PositionLike]) -> Optional[Position]:
    if value is None or isinstance(value, Position):
        return value
    row, col = value
    return Position(row, col)


def _classify_exit(position: Optional[Position], width: int, height: int) -> ExitSide:
    if position is None:
        return ExitSide.NONE

    row, col = position.row, position.col
    if 0 <= row < height and 0 <= col < width:
        return ExitSide.NONE
    if row == -1 and 0 <= col < width:
        return ExitSide.TOP
    if row == height and 0 <= col < width:
        return ExitSide.BOTTOM
    if col == -1 and 0 <= row < height:
        return ExitSide.LEFT
    if col == width and 0 <= row < height:
        return ExitSide.RIGHT
    raise InvalidExitError(
        f"Exit at {position} must be directly outside an edge of the {height}x{width} board"
    )

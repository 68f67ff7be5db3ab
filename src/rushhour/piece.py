"""
Piece Module - Rigid 1xN / Nx1 blocks that slide along their own axis.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidPieceError
from .position import Position


PRIMARY_ID = "P"
EXIT_GLYPH = "K"


class Orientation(Enum):
    """Axis a piece moves along."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


def is_piece_id(glyph: str) -> bool:
    """True for a single uppercase A-Z character other than the exit marker."""
    return (
        len(glyph) == 1
        and "A" <= glyph <= "Z"
        and glyph != EXIT_GLYPH
    )


@dataclass(frozen=True)
class Piece:
    """
    Immutable straight block of cells.

    Cells are kept sorted along the movement axis, so cells[0] is the
    back (top/left) end and cells[-1] is the front (bottom/right) end.
    Moving a piece produces a new Piece; the Board swaps it into a copy.

    Attributes:
        piece_id: Single-character identifier ('P' is the primary piece)
        orientation: Movement axis, derived from the cell span
        cells: Occupied positions, sorted along the axis
    """
    piece_id: str
    orientation: Orientation
    cells: Tuple[Position, ...]

    @classmethod
    def from_cells(cls, piece_id: str, cells: Iterable[Position]) -> 'Piece':
        """
        Validate a set of cells and build a Piece from them.

        Args:
            piece_id: Piece identifier
            cells: Positions covered by the piece, in any order

        Returns:
            Piece with derived orientation and sorted cells

        Raises:
            InvalidPieceError: If the id or the shape is invalid
        """
        if not is_piece_id(piece_id):
            raise InvalidPieceError(
                f"Invalid piece id {piece_id!r}. Only uppercase letters A-Z "
                f"other than '{EXIT_GLYPH}' are allowed."
            )

        positions = list(cells)
        if not positions:
            raise InvalidPieceError(f"Piece '{piece_id}' has no positions")
        if len(set(positions)) != len(positions):
            raise InvalidPieceError(f"Piece '{piece_id}' has duplicate positions")

        if len(positions) == 1:
            if piece_id != PRIMARY_ID:
                raise InvalidPieceError(
                    f"Piece '{piece_id}' must occupy at least 2 cells, but only has 1"
                )
            # Single-cell primary pieces are allowed for degenerate boards.
            return cls(piece_id, Orientation.HORIZONTAL, tuple(positions))

        rows = {p.row for p in positions}
        cols = {p.col for p in positions}
        row_span = max(rows) - min(rows) + 1
        col_span = max(cols) - min(cols) + 1

        if row_span == 1:
            orientation = Orientation.HORIZONTAL
            span, covered, start = col_span, cols, min(cols)
        elif col_span == 1:
            orientation = Orientation.VERTICAL
            span, covered, start = row_span, rows, min(rows)
        else:
            raise InvalidPieceError(
                f"Piece '{piece_id}' is not linear. It spans {row_span} rows and "
                f"{col_span} columns. Pieces must be either 1xN or Nx1."
            )

        if len(positions) != span:
            raise InvalidPieceError(
                f"Piece '{piece_id}' has gaps. Expected {span} consecutive cells "
                f"but found {len(positions)}"
            )
        for index in range(start, start + span):
            if index not in covered:
                axis = "column" if orientation is Orientation.HORIZONTAL else "row"
                raise InvalidPieceError(f"Piece '{piece_id}' has a gap at {axis} {index}")

        return cls(piece_id, orientation, _sort_cells(positions, orientation))

    @property
    def is_primary(self) -> bool:
        return self.piece_id == PRIMARY_ID

    @property
    def is_horizontal(self) -> bool:
        return self.orientation is Orientation.HORIZONTAL

    @property
    def size(self) -> int:
        """Number of cells covered."""
        return len(self.cells)

    @property
    def back(self) -> Position:
        """Top/left end of the piece."""
        return self.cells[0]

    @property
    def front(self) -> Position:
        """Bottom/right end of the piece."""
        return self.cells[-1]

    @property
    def lane(self) -> int:
        """Fixed coordinate: the row of a horizontal piece, the column of a vertical one."""
        return self.cells[0].row if self.is_horizontal else self.cells[0].col

    def step(self, direction: int) -> Tuple[int, int]:
        """(d_row, d_col) for one cell of travel in the given direction."""
        if self.is_horizontal:
            return 0, direction
        return direction, 0

    def leading_cell(self, direction: int) -> Position:
        """End of the piece that leads when moving in direction (+1 or -1)."""
        return self.front if direction > 0 else self.back

    def shifted(self, steps: int) -> 'Piece':
        """
        Return this piece moved along its axis.

        Args:
            steps: Signed number of cells (positive = right/down)

        Returns:
            New Piece; ordering of cells is preserved by a uniform shift
        """
        d_row, d_col = self.step(steps)
        return Piece(
            self.piece_id,
            self.orientation,
            tuple(cell.shifted(d_row, d_col) for cell in self.cells),
        )

    def __str__(self) -> str:
        cells = ", ".join(str(c) for c in self.cells)
        return f"Piece({self.piece_id}, {self.orientation.value}, [{cells}])"


def _sort_cells(cells: Iterable[Position], orientation: Orientation) -> Tuple[Position, ...]:
    if orientation is Orientation.HORIZONTAL:
        return tuple(sorted(cells, key=lambda p: (p.row, p.col)))
    return tuple(sorted(cells, key=lambda p: (p.col, p.row)))

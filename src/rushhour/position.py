"""
Position Module - Grid coordinate value type.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """
    Immutable (row, col) coordinate on the board.

    Coordinates may lie outside the grid: the primary piece keeps
    tracking its cells after sliding through the exit.

    Attributes:
        row: Row index (0 = top)
        col: Column index (0 = left)
    """
    row: int
    col: int

    def shifted(self, d_row: int, d_col: int) -> 'Position':
        """Return a new position offset by (d_row, d_col)."""
        return Position(self.row + d_row, self.col + d_col)

    def manhattan(self, other: 'Position') -> int:
        """Taxicab distance to another position."""
        return abs(self.row - other.row) + abs(self.col - other.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

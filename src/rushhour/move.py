"""
Move Module - Slides of a single piece along its axis.
"""

from dataclasses import dataclass

from .piece import Orientation


_LABELS = {
    (Orientation.HORIZONTAL, 1): "right",
    (Orientation.HORIZONTAL, -1): "left",
    (Orientation.VERTICAL, 1): "down",
    (Orientation.VERTICAL, -1): "up",
}


@dataclass(frozen=True)
class Move:
    """
    One-cell slide of a piece.

    Attributes:
        piece_id: Identifier of the piece being moved
        direction: +1 for right/down, -1 for left/up
        orientation: Axis of the moved piece (needed to name the direction)
    """
    piece_id: str
    direction: int
    orientation: Orientation

    @classmethod
    def create(cls, piece_id: str, orientation: Orientation, label: str) -> 'Move':
        """
        Create a Move from a direction label ("right", "up", ...).

        Raises:
            ValueError: If the label does not fit the orientation
        """
        for (axis, direction), name in _LABELS.items():
            if axis is orientation and name == label.lower():
                return cls(piece_id=piece_id, direction=direction, orientation=orientation)
        raise ValueError(f"Direction {label!r} is not valid for a {orientation.value} piece")

    @property
    def magnitude(self) -> int:
        """Number of cells travelled."""
        return 1

    @property
    def label(self) -> str:
        """Direction as a word: right, left, down or up."""
        return _LABELS[(self.orientation, self.direction)]

    @property
    def offset(self) -> int:
        """Signed displacement along the piece's axis."""
        return self.direction * self.magnitude

    def __str__(self) -> str:
        return f"{self.piece_id}-{self.label.upper()}"


@dataclass(frozen=True)
class CompoundMove(Move):
    """
    Multi-cell slide in one direction, charged as a single move.

    Attributes:
        distance: Number of cells travelled (>= 1)
    """
    distance: int = 1

    @property
    def magnitude(self) -> int:
        return self.distance

    def __str__(self) -> str:
        return f"{self.piece_id}-{self.label.upper()}({self.distance})"

"""
Errors Module - Construction failures for boards and pieces.

Search never raises for dead ends or unsolvable boards; those are
reported through SearchResult. Everything here is raised while building
a Board from parsed input and is not recoverable for that input.
"""


class BoardConstructionError(ValueError):
    """Base class for invalid puzzle input."""


class BoardShapeError(BoardConstructionError):
    """Board dimensions or grid rows are inconsistent."""


class InvalidGlyphError(BoardConstructionError):
    """A grid cell holds a character that is not a piece id or empty."""


class InvalidPieceError(BoardConstructionError):
    """A piece is not a straight, contiguous 1xN or Nx1 run."""


class MissingPrimaryPieceError(BoardConstructionError):
    """The board has no primary piece."""


class PieceCountMismatchError(BoardConstructionError):
    """Declared and actual number of non-primary pieces differ."""


class InvalidExitError(BoardConstructionError):
    """The exit is not directly outside one of the board edges."""

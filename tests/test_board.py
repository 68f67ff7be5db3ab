"""
Tests for board construction, move generation and the exit policy.

Usage:
    pytest tests/test_board.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.rushhour import (
    Board,
    BoardConstructionError,
    BoardShapeError,
    CompoundMove,
    ExitSide,
    InvalidExitError,
    InvalidGlyphError,
    InvalidPieceError,
    MissingPrimaryPieceError,
    Move,
    Orientation,
    PieceCountMismatchError,
    Position,
)


@pytest.fixture
def blocked_board():
    # B must slide down before P can reach the right-hand exit
    return Board.from_rows(["PPB", "..B", "..."], exit_position=(0, 3))


@pytest.fixture
def open_board():
    return Board.from_rows(["PP...", ".....", "AA..."], exit_position=(0, 5))


def assert_consistent(board):
    """Every piece keeps its size and the grid shows exactly its cells."""
    for piece in board.pieces:
        occupied = [
            Position(r, c)
            for r in range(board.height)
            for c in range(board.width)
            if board.grid[r][c] == piece.piece_id
        ]
        assert sorted(occupied) == sorted(piece.cells)


class TestConstruction:
    def test_from_rows_reads_dimensions_and_pieces(self, blocked_board):
        assert blocked_board.width == 3
        assert blocked_board.height == 3
        assert [p.piece_id for p in blocked_board.pieces] == ["B", "P"]

        primary = blocked_board.primary
        assert primary.orientation is Orientation.HORIZONTAL
        assert primary.cells == (Position(0, 0), Position(0, 1))
        assert blocked_board.get_piece("B").orientation is Orientation.VERTICAL

    def test_exit_is_classified_and_normalized(self, blocked_board):
        assert blocked_board.exit_side is ExitSide.RIGHT
        assert blocked_board.exit_position == Position(0, 3)
        assert blocked_board.exit_cell == Position(0, 2)
        assert blocked_board.exit_lane == 0
        assert blocked_board.is_primary_aligned()

    @pytest.mark.parametrize("exit_position, side, cell", [
        ((-1, 1), ExitSide.TOP, Position(0, 1)),
        ((3, 1), ExitSide.BOTTOM, Position(2, 1)),
        ((1, -1), ExitSide.LEFT, Position(1, 0)),
        ((1, 3), ExitSide.RIGHT, Position(1, 2)),
    ])
    def test_every_side(self, exit_position, side, cell):
        board = Board.from_rows(["...", "PP.", "..."], exit_position=exit_position)
        assert board.exit_side is side
        assert board.exit_cell == cell

    def test_exit_side_given_explicitly(self):
        board = Board.from_rows(["PP."], exit_position=(0, 3), exit_side="right")
        assert board.exit_side is ExitSide.RIGHT

    def test_exit_inside_grid_means_no_exit(self):
        board = Board.from_rows(["PP.", "..."], exit_position=(1, 1))
        assert board.exit_side is ExitSide.NONE
        assert board.exit_cell is None
        assert not board.is_solved()

    def test_misaligned_primary_is_allowed(self, caplog):
        board = Board.from_rows(["P..", "P..", "..."], exit_position=(0, 3))
        assert not board.is_primary_aligned()
        assert "not aligned" in caplog.text

    def test_single_cell_primary(self):
        board = Board.from_rows(["P.."], exit_position=(0, 3))
        assert board.primary.size == 1
        assert board.primary.orientation is Orientation.HORIZONTAL

    def test_piece_count_matches_non_primary_pieces(self):
        board = Board.from_rows(["PPB", "..B"], exit_position=(0, 3), piece_count=1)
        assert len(board.pieces) == 2


class TestConstructionErrors:
    @pytest.mark.parametrize("rows, exit_position, error", [
        (["PP.", ".."], (0, 3), BoardShapeError),
        (["P"], (0, 1), BoardShapeError),
        (["PPa"], (0, 3), InvalidGlyphError),
        (["PP#"], (0, 3), InvalidGlyphError),
        (["PPK"], (0, 3), InvalidGlyphError),
        (["AA.", "..."], (0, 3), MissingPrimaryPieceError),
        (["PPA", ".AA"], (0, 3), InvalidPieceError),
        (["PPA", "..."], (0, 3), InvalidPieceError),
        (["PA.A"], (0, 4), InvalidPieceError),
        (["PP."], (-1, -1), InvalidExitError),
        (["PP."], (0, 5), InvalidExitError),
    ])
    def test_invalid_input(self, rows, exit_position, error):
        with pytest.raises(error):
            Board.from_rows(rows, exit_position=exit_position)

    def test_zero_dimensions(self):
        with pytest.raises(BoardShapeError):
            Board.create(0, 2, [], (0, 0))

    def test_row_count_mismatch(self):
        with pytest.raises(BoardShapeError):
            Board.create(3, 2, ["PP."], (0, 3))

    def test_piece_count_mismatch(self):
        with pytest.raises(PieceCountMismatchError):
            Board.from_rows(["PPB", "..B"], exit_position=(0, 3), piece_count=2)

    def test_unknown_exit_side(self):
        with pytest.raises(InvalidExitError):
            Board.from_rows(["PP."], exit_position=(0, 3), exit_side="diagonal")

    def test_exit_side_disagrees_with_position(self):
        with pytest.raises(InvalidExitError):
            Board.from_rows(["PP."], exit_position=(0, 3), exit_side="left")

    def test_errors_are_value_errors(self):
        assert issubclass(BoardConstructionError, ValueError)
        with pytest.raises(ValueError):
            Board.from_rows(["..."], exit_position=(0, 3))


class TestMoves:
    def test_legal_moves(self, blocked_board):
        moves = blocked_board.legal_moves()
        assert [str(m) for m in moves] == ["B-DOWN"]

    def test_primary_cannot_leave_through_a_wall(self):
        board = Board.from_rows(["PP."], exit_position=(0, 3))
        assert [str(m) for m in board.legal_moves()] == ["P-RIGHT"]

    def test_make_move_leaves_original_untouched(self, blocked_board):
        before = blocked_board.to_rows()
        after = blocked_board.make_move(Move("B", 1, Orientation.VERTICAL))

        assert blocked_board.to_rows() == before
        assert after.to_rows() == ["PP.", "..B", "..B"]
        assert after is not blocked_board
        assert after.get_piece("B").cells == (Position(1, 2), Position(2, 2))
        assert blocked_board.diff(after) == [(0, 2), (2, 2)]

    def test_make_move_unknown_piece(self, blocked_board):
        with pytest.raises(ValueError):
            blocked_board.make_move(Move("Z", 1, Orientation.VERTICAL))

    def test_moves_are_reversible(self, open_board):
        for move in open_board.legal_moves():
            moved = open_board.make_move(move)
            back = moved.make_move(Move(move.piece_id, -move.direction, move.orientation))
            assert back == open_board
            assert back.state_key() == open_board.state_key()

    def test_shape_is_preserved(self, open_board):
        board = open_board
        for _ in range(3):
            board = board.make_move(board.legal_moves()[-1])
            assert_consistent(board)

    def test_compound_move_equals_repeated_simple_moves(self, open_board):
        compound = {str(m): m for m in open_board.compound_moves()}
        assert set(compound) == {"A-RIGHT(3)", "P-RIGHT(3)"}

        step = Move("A", 1, Orientation.HORIZONTAL)
        stepped = open_board
        for _ in range(3):
            stepped = stepped.make_move(step)
        assert open_board.make_move(compound["A-RIGHT(3)"]) == stepped

    def test_compound_move_stops_at_goal(self, open_board):
        move = next(m for m in open_board.compound_moves() if m.piece_id == "P")
        assert move.distance == 3
        assert open_board.make_move(move).is_solved()

    def test_compound_move_offset_and_label(self):
        move = CompoundMove("A", -1, Orientation.VERTICAL, distance=2)
        assert move.offset == -2
        assert move.label == "up"

    def test_move_create_from_label(self):
        assert Move.create("B", Orientation.VERTICAL, "Down").direction == 1
        with pytest.raises(ValueError):
            Move.create("B", Orientation.VERTICAL, "left")


class TestExitPolicy:
    def test_solved_when_front_reaches_exit_cell(self):
        assert Board.from_rows([".PP"], exit_position=(0, 3)).is_solved()
        assert not Board.from_rows(["PP."], exit_position=(0, 3)).is_solved()

    def test_solved_for_left_exit(self):
        assert Board.from_rows(["PP."], exit_position=(0, -1)).is_solved()
        assert not Board.from_rows([".PP"], exit_position=(0, -1)).is_solved()

    def test_solved_for_vertical_exits(self):
        assert Board.from_rows(["..", "P.", "P."], exit_position=(3, 0)).is_solved()
        assert Board.from_rows(["P.", "P.", ".."], exit_position=(-1, 0)).is_solved()
        assert not Board.from_rows(["P.", "P.", ".."], exit_position=(3, 0)).is_solved()

    def test_primary_out_of_lane_is_not_solved(self):
        board = Board.from_rows(["...", ".PP"], exit_position=(0, 3))
        assert not board.is_solved()

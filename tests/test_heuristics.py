"""
Tests for heuristic evaluators and heuristic name resolution.

Usage:
    pytest tests/test_heuristics.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.rushhour import (
    INFINITY,
    Board,
    Heuristic,
    blocking_count,
    clearing_moves,
    direct_distance,
    manhattan_distance,
    solve_ucs,
)
from src.rushhour.heuristics import resolve


@pytest.fixture
def blocked_board():
    return Board.from_rows(["PPB", "..B", "..."], exit_position=(0, 3))


@pytest.fixture
def parking_lot():
    return Board.from_rows([
        "..B...",
        "PPB..C",
        "...D.C",
        "...D..",
        "EEE...",
        "......",
    ], exit_position=(1, 6))


class TestEvaluators:
    def test_blocked_board(self, blocked_board):
        assert manhattan_distance(blocked_board) == 1
        assert direct_distance(blocked_board) == 1
        assert blocking_count(blocked_board) == 1
        # One cell for P plus one slide down for B
        assert clearing_moves(blocked_board) == 2

    def test_parking_lot(self, parking_lot):
        assert manhattan_distance(parking_lot) == 4
        assert direct_distance(parking_lot) == 4
        assert blocking_count(parking_lot) == 2
        # B needs two cells down, C needs one
        assert clearing_moves(parking_lot) == 7

    def test_solved_board_scores_zero(self):
        board = Board.from_rows(["..PP", "...."], exit_position=(0, 4))
        for heuristic in Heuristic:
            assert heuristic.evaluate(board) == 0

    def test_left_and_vertical_exits(self):
        left = Board.from_rows(["..PP"], exit_position=(0, -1))
        assert direct_distance(left) == 2
        down = Board.from_rows(["P.", "P.", "..", ".."], exit_position=(4, 0))
        assert direct_distance(down) == 2
        assert manhattan_distance(down) == 2

    def test_orientation_mismatch_is_infinite(self):
        board = Board.from_rows(["P..", "P..", "..."], exit_position=(0, 3))
        assert direct_distance(board) == INFINITY
        assert blocking_count(board) == INFINITY
        assert clearing_moves(board) == INFINITY

    def test_no_exit_is_infinite(self):
        board = Board.from_rows(["PP.", "..."], exit_position=None)
        for heuristic in Heuristic:
            assert heuristic.evaluate(board) == INFINITY

    def test_parallel_blocker_can_never_clear(self):
        board = Board.from_rows(["PPAA", "...."], exit_position=(0, 4))
        assert blocking_count(board) == 1
        assert clearing_moves(board) == INFINITY

    def test_blocker_without_room_can_never_clear(self):
        board = Board.from_rows(["APPB", "A..B"], exit_position=(0, 4))
        assert clearing_moves(board) == INFINITY

    def test_crowded_blocker_costs_an_extra_move(self):
        # B can drop one cell only after C moves away
        board = Board.from_rows(["PPB", "..B", ".CC"], exit_position=(0, 3))
        assert clearing_moves(board) == 1 + 2

    def test_compound_moves_break_distance_bounds(self):
        # One maximal slide covers all four cells to the exit
        board = Board.from_rows(["PP....", "......"], exit_position=(0, 6))
        result = solve_ucs(board, compound_moves=True)
        assert result.solution.move_count == 1
        assert manhattan_distance(board) == 4
        assert direct_distance(board) == 4
        assert blocking_count(board) <= result.solution.move_count


class TestHeuristicNames:
    @pytest.mark.parametrize("name, expected", [
        ("manhattan", Heuristic.MANHATTAN),
        ("DIRECT", Heuristic.DIRECT),
        ("Blocking Count", Heuristic.BLOCKING),
        (" clearing ", Heuristic.CLEARING),
        (Heuristic.CLEARING, Heuristic.CLEARING),
    ])
    def test_parse(self, name, expected):
        assert Heuristic.parse(name) is expected

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Available"):
            Heuristic.parse("euclidean")

    def test_resolve_defaults_to_manhattan(self):
        assert resolve(None) is Heuristic.MANHATTAN
        assert resolve("direct") is Heuristic.DIRECT

    def test_labels(self):
        assert [h.label for h in Heuristic] == [
            "Manhattan Distance",
            "Direct Distance",
            "Blocking Count",
            "Clearing Moves",
        ]

"""
Unit tests for flag management and win detection.
"""
import pytest
from sweeper import Board, RevealEngine, evaluate, toggle_flag


# ============================================================================
# Flag Tests
# ============================================================================

class TestToggleFlag:
    """Test flagging behavior."""

    def test_flag_hidden_cell(self, corner_board: Board) -> None:
        result = toggle_flag(corner_board, 1, 1, 0, 1)
        assert result.flag_count == 1
        assert result.placed is True
        assert corner_board.cell(1, 1).is_flagged is True

    def test_unflag_decrements(self, corner_board: Board) -> None:
        toggle_flag(corner_board, 1, 1, 0, 1)
        result = toggle_flag(corner_board, 1, 1, 1, 1)
        assert result.flag_count == 0
        assert result.placed is False
        assert corner_board.cell(1, 1).is_hidden is True

    def test_revealed_cell_cannot_be_flagged(self, corner_board: Board) -> None:
        RevealEngine().reveal(corner_board, 1, 1)
        result = toggle_flag(corner_board, 1, 1, 0, 1)
        assert result.flag_count == 0
        assert corner_board.cell(1, 1).is_flagged is False

    def test_budget_exhausted_is_silent_noop(self, corner_board: Board) -> None:
        toggle_flag(corner_board, 0, 0, 0, 1)
        result = toggle_flag(corner_board, 1, 1, 1, 1)
        assert result.flag_count == 1
        assert result.placed is False
        assert corner_board.cell(1, 1).is_flagged is False

    def test_unflag_allowed_when_budget_full(self, corner_board: Board) -> None:
        toggle_flag(corner_board, 0, 0, 0, 1)
        result = toggle_flag(corner_board, 0, 0, 1, 1)
        assert result.flag_count == 0

    @pytest.mark.parametrize("row, col", [(-1, 0), (2, 2), (0, 9)])
    def test_out_of_bounds_is_noop(
        self, corner_board: Board, row: int, col: int
    ) -> None:
        result = toggle_flag(corner_board, row, col, 0, 1)
        assert result.flag_count == 0
        assert corner_board.flagged_positions() == []

    def test_flag_count_never_exceeds_mines(self, make_board) -> None:
        board = make_board(["*..", ".*.", "..."])
        count = 0
        for row, col in board.positions():
            count = toggle_flag(board, row, col, count, 2).flag_count
            assert count <= 2
        assert count == 2
        assert len(board.flagged_positions()) == count


# ============================================================================
# Win Detection Tests
# ============================================================================

class TestEvaluate:
    """Win iff flagged set equals mine set."""

    def test_single_mine_flagged_wins(self, make_board) -> None:
        board = make_board(["*."])
        board.cell(0, 0).is_flagged = True
        assert evaluate(board, 1) is True

    def test_flag_on_wrong_cell_does_not_win(self, make_board) -> None:
        board = make_board(["*."])
        board.cell(0, 1).is_flagged = True
        assert evaluate(board, 1) is False

    def test_missing_flag_does_not_win(self, make_board) -> None:
        board = make_board(["*.*"])
        board.cell(0, 0).is_flagged = True
        assert evaluate(board, 2) is False

    def test_extra_flag_does_not_win(self, make_board) -> None:
        board = make_board(["*.."])
        board.cell(0, 0).is_flagged = True
        board.cell(0, 2).is_flagged = True
        assert evaluate(board, 1) is False

    def test_flag_count_must_match_mine_count(self, make_board) -> None:
        board = make_board(["*.."])
        board.cell(0, 0).is_flagged = True
        assert evaluate(board, 2) is False

    def test_reveals_do_not_matter(self, make_board) -> None:
        board = make_board(["*.."])
        RevealEngine().reveal(board, 0, 2)
        assert evaluate(board, 1) is False
        board.cell(0, 0).is_flagged = True
        assert evaluate(board, 1) is True

"""
Flag management for Minesweeper game.

Flags are capped at the number of mines on the board; an attempt to
place one more is quietly ignored.
"""
from dataclasses import dataclass

from .board import Board


@dataclass(frozen=True)
class FlagResult:
    """
    Outcome of a flag toggle.

    Attributes:
        board: The (mutated) board.
        flag_count: Flags on the board after the toggle.
        placed: True only when a new flag was put down.
    """

    board: Board
    flag_count: int
    placed: bool = False


def toggle_flag(
    board: Board, row: int, col: int, flag_count: int, mine_count: int
) -> FlagResult:
    """
    Toggle flag on a cell.

    Args:
        board: Board to mutate.
        row: Row index.
        col: Column index.
        flag_count: Flags currently on the board.
        mine_count: Flag budget.

    Returns:
        FlagResult with the updated flag count.
    """
    cell = board.get_cell(row, col)
    if cell is None or cell.is_revealed:
        return FlagResult(board, flag_count)

    if cell.is_flagged:
        cell.is_flagged = False
        return FlagResult(board, flag_count - 1)

    if flag_count >= mine_count:
        return FlagResult(board, flag_count)

    cell.is_flagged = True
    return FlagResult(board, flag_count + 1, placed=True)

"""Win detection: the game is won when the flags sit exactly on the mines."""
from .board import Board


def evaluate(board: Board, mine_count: int) -> bool:
    """
    Check whether the flagged cells are exactly the mine cells.

    Args:
        board: Board to inspect.
        mine_count: Expected number of mines (and therefore flags).

    Returns:
        True iff every mine is flagged, every flag is on a mine and the
        number of flags equals ``mine_count``.
    """
    flagged = 0
    for row, col in board.positions():
        cell = board.cell(row, col)
        if cell.is_mine != cell.is_flagged:
            return False
        if cell.is_flagged:
            flagged += 1
    return flagged == mine_count

"""
Reveal module for Minesweeper game.

Implements single-cell reveal with zero-cascade flood fill and the
chord action on numbered cells.
"""
import logging
from dataclasses import dataclass
from typing import List

from .board import Board, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a reveal or chord.

    Attributes:
        board: The (mutated) board.
        hit_mine: True when a mine was uncovered; all mines are now shown.
        revealed: Number of cells newly revealed by this call.
    """

    board: Board
    hit_mine: bool = False
    revealed: int = 0


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Applies reveal and chord actions to a board.

    Two chord policies exist in the wild. The permissive one (default)
    chords whenever the target is a revealed number; the strict one also
    requires the number of flagged neighbors to match that number.
    """

    def __init__(self, chord_requires_flag_match: bool = False) -> None:
        self.chord_requires_flag_match = chord_requires_flag_match

    def reveal(self, board: Board, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        Flagged, already revealed and out-of-bounds cells are left alone.
        A mine reveals every mine on the board. A blank cell floods
        outward over blank neighbors and stops at numbered ones.

        Args:
            board: Board to mutate.
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult with the board and whether a mine was hit.
        """
        cell = board.get_cell(row, col)
        if cell is None or cell.is_flagged or cell.is_revealed:
            return RevealResult(board)

        if cell.is_mine:
            board.reveal_all_mines()
            logger.debug("Mine hit at (%d, %d)", row, col)
            return RevealResult(board, hit_mine=True)

        revealed = self._flood_fill(board, row, col)
        return RevealResult(board, revealed=revealed)

    def _flood_fill(self, board: Board, row: int, col: int) -> int:
        """
        Reveal from a safe cell, cascading through blank cells.

        The revealed flag doubles as the visited marker, so each cell is
        pushed and uncovered at most once.
        """
        board.cell(row, col).is_revealed = True
        revealed = 1
        stack: List[Position] = [(row, col)]

        while stack:
            current_row, current_col = stack.pop()
            if board.cell(current_row, current_col).neighbor_mines != 0:
                continue
            for neighbor_row, neighbor_col in board.neighbors(
                current_row, current_col
            ):
                neighbor = board.cell(neighbor_row, neighbor_col)
                if neighbor.is_revealed or neighbor.is_mine or neighbor.is_flagged:
                    continue
                neighbor.is_revealed = True
                revealed += 1
                stack.append((neighbor_row, neighbor_col))

        return revealed

    def chord_reveal(self, board: Board, row: int, col: int) -> RevealResult:
        """
        Chord action: reveal every unflagged covered neighbor of a number.

        Args:
            board: Board to mutate.
            row: Row index of a revealed numbered cell.
            col: Column index of a revealed numbered cell.

        Returns:
            RevealResult; ``hit_mine`` is set if any chorded cell was a mine.
        """
        if not self._can_chord(board, row, col):
            return RevealResult(board)

        targets = [
            (r, c) for r, c in board.neighbors(row, col)
            if not board.cell(r, c).is_flagged and not board.cell(r, c).is_revealed
        ]

        if any(board.cell(r, c).is_mine for r, c in targets):
            board.reveal_all_mines()
            logger.debug("Chord at (%d, %d) uncovered a mine", row, col)
            return RevealResult(board, hit_mine=True)

        revealed = 0
        for target_row, target_col in targets:
            revealed += self.reveal(board, target_row, target_col).revealed
        return RevealResult(board, revealed=revealed)

    def _can_chord(self, board: Board, row: int, col: int) -> bool:
        """Check if chord action is valid."""
        cell = board.get_cell(row, col)
        if cell is None:
            return False
        if not cell.is_revealed or cell.is_mine or cell.neighbor_mines == 0:
            return False
        if self.chord_requires_flag_match:
            return board.count_neighbor_flags(row, col) == cell.neighbor_mines
        return True

"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their flags
(revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Revealed and flagged are independent flags: when a game is lost every
    mine is revealed, including the ones already carrying a flag.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been uncovered.
        is_flagged: Whether the player marked this cell as a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    @property
    def state(self) -> CellState:
        """Visual state; a revealed cell shows as revealed even if flagged."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is covered and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_blank(self) -> bool:
        """Check if cell is a non-mine with no neighboring mines."""
        return not self.is_mine and self.neighbor_mines == 0

    def to_observation(self) -> int:
        """
        Convert cell to observation value for renderers and agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        state = self.state
        if state == CellState.HIDDEN:
            return -1
        if state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.neighbor_mines


@dataclass(frozen=True)
class CellView:
    """Read-only snapshot of a cell handed to outside collaborators."""

    is_mine: bool
    is_revealed: bool
    is_flagged: bool
    neighbor_mines: int

    @classmethod
    def of(cls, cell: Cell) -> "CellView":
        return cls(
            is_mine=cell.is_mine,
            is_revealed=cell.is_revealed,
            is_flagged=cell.is_flagged,
            neighbor_mines=cell.neighbor_mines,
        )

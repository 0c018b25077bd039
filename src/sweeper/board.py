"""
Board module for Minesweeper game.

Implements the game grid, its configuration and presets, and the
generator that places mines and computes neighbor counts.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellView

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

class ConfigurationError(ValueError):
    """Raised when a board configuration cannot produce a valid board."""


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 10
    cols: int = 10
    mine_count: int = 15

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mine_count > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels as (rows, cols, mine_count)
EASY = GameConfig(10, 10, 15)
MEDIUM = GameConfig(16, 16, 40)
HARD = GameConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game grid.

    Holds the cells and answers geometry questions. Game rules live in
    the reveal, flag and win modules; the board only stores state.
    """

    config: GameConfig
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if not self._grid:
            self._grid = [
                [Cell() for _ in range(self.config.cols)]
                for _ in range(self.config.rows)
            ]

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the in-bounds Moore neighbors of a cell.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, at most eight.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    result.append((new_row, new_col))
        return result

    def count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for r, c in self.neighbors(row, col) if self._grid[r][c].is_mine
        )

    def count_neighbor_flags(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to a specific cell."""
        return sum(
            1 for r, c in self.neighbors(row, col) if self._grid[r][c].is_flagged
        )

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at an in-bounds position."""
        return self._grid[row][col]

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def mine_positions(self) -> List[Position]:
        return [(r, c) for r, c in self.positions() if self._grid[r][c].is_mine]

    def flagged_positions(self) -> List[Position]:
        return [
            (r, c) for r, c in self.positions() if self._grid[r][c].is_flagged
        ]

    def revealed_count(self) -> int:
        """Count uncovered safe cells; mines shown at game over are excluded."""
        return sum(
            1 for r, c in self.positions()
            if self._grid[r][c].is_revealed and not self._grid[r][c].is_mine
        )

    def reveal_all_mines(self) -> None:
        """Uncover every mine on the board (loss presentation)."""
        for row, col in self.mine_positions():
            self._grid[row][col].is_revealed = True

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of Cell.to_observation values.
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def view(self) -> "BoardView":
        return BoardView(self)


class BoardView:
    """Read-only window onto a board for renderers and other callers."""

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def cols(self) -> int:
        return self._board.cols

    @property
    def mine_count(self) -> int:
        return self._board.mine_count

    def cell(self, row: int, col: int) -> Optional[CellView]:
        """Snapshot of the cell at position, or None if out of bounds."""
        cell = self._board.get_cell(row, col)
        if cell is None:
            return None
        return CellView.of(cell)

    def get_observation(self) -> np.ndarray:
        return self._board.get_observation()

    def revealed_count(self) -> int:
        return self._board.revealed_count()

    def __repr__(self) -> str:
        return f"BoardView(rows={self.rows}, cols={self.cols})"


# ============================================================================
# Board Generation
# ============================================================================

class BoardGenerator:
    """
    Builds fresh boards with randomly placed mines.

    The random source only needs a ``randrange`` method, so tests can
    inject a seeded ``random.Random`` or a scripted stand-in.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def generate(self, rows: int, cols: int, mine_count: int) -> Board:
        """
        Create a board with exactly ``mine_count`` mines.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            mine_count: Mines to place; must be below rows * cols.

        Returns:
            New board with neighbor counts filled in.

        Raises:
            ConfigurationError: If the dimensions or mine count are invalid.
        """
        config = GameConfig(rows, cols, mine_count)
        board = Board(config)
        self._place_mines(board)
        self._calculate_neighbor_mines(board)
        logger.debug(
            "Generated %dx%d board with %d mines", rows, cols, mine_count
        )
        return board

    def _place_mines(self, board: Board) -> None:
        """Rejection-sample positions until enough distinct mines exist."""
        placed = 0
        while placed < board.mine_count:
            row = self.rng.randrange(board.rows)
            col = self.rng.randrange(board.cols)
            cell = board.cell(row, col)
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _calculate_neighbor_mines(self, board: Board) -> None:
        """Calculate neighbor mine counts for all non-mine cells."""
        for row, col in board.positions():
            cell = board.cell(row, col)
            if not cell.is_mine:
                cell.neighbor_mines = board.count_neighbor_mines(row, col)

"""
Minesweeper engine package.

Provides board generation, reveal and flag rules, win detection and the
game state machine, plus a gymnasium adapter.
"""
from .cell import Cell, CellState, CellView
from .board import (
    Board,
    BoardGenerator,
    BoardView,
    ConfigurationError,
    GameConfig,
    EASY,
    MEDIUM,
    HARD,
)
from .reveal import RevealEngine, RevealResult
from .flags import FlagResult, toggle_flag
from .win import evaluate
from .ticker import Ticker, ManualTicker
from .session import Difficulty, GameSession, GameState, GameStateMachine
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardGenerator",
    "BoardView",
    "ConfigurationError",
    "GameConfig",
    "EASY",
    "MEDIUM",
    "HARD",
    "RevealEngine",
    "RevealResult",
    "FlagResult",
    "toggle_flag",
    "evaluate",
    "Ticker",
    "ManualTicker",
    "Difficulty",
    "GameSession",
    "GameState",
    "GameStateMachine",
    "MinesweeperEnv",
]

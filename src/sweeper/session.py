"""
Game session and lifecycle state machine.

The state machine is the single entry point for outside callers. It
owns the session, routes intents to the reveal, flag and win modules,
and starts/stops the elapsed-time ticker on state transitions.
"""
import logging
import random
from enum import Enum, auto
from typing import Callable, Optional, Union

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
from .flags import FlagResult, toggle_flag
from .reveal import RevealEngine, RevealResult
from .ticker import Ticker, TickCallback
from . import win

logger = logging.getLogger(__name__)

TickerFactory = Callable[[TickCallback], Ticker]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    WAITING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


class Difficulty(Enum):
    """Named presets offered to players."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def config(self) -> GameConfig:
        return _PRESETS[self]


_PRESETS = {
    Difficulty.EASY: EASY,
    Difficulty.MEDIUM: MEDIUM,
    Difficulty.HARD: HARD,
}


# ============================================================================
# Session
# ============================================================================

class GameSession:
    """
    One game in progress.

    Outside callers get read-only access through the properties; the
    mutators below are driven by GameStateMachine.
    """

    def __init__(self, board: Board) -> None:
        self._board = board
        self._state = GameState.WAITING
        self._flag_count = 0
        self._elapsed_seconds = 0
        self._ticker: Optional[Ticker] = None

    @property
    def board(self) -> BoardView:
        return self._board.view()

    @property
    def config(self) -> GameConfig:
        return self._board.config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def flag_count(self) -> int:
        return self._flag_count

    @property
    def mine_count(self) -> int:
        return self._board.mine_count

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def ticker_running(self) -> bool:
        return self._ticker is not None and self._ticker.running

    # ========================================================================
    # Mutators
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        return self._board.in_bounds(row, col)

    def start(self, ticker: Ticker) -> None:
        """Move from WAITING to PLAYING and start the clock."""
        self._state = GameState.PLAYING
        self._ticker = ticker
        ticker.start()

    def finish(self, state: GameState) -> None:
        """Enter a terminal state and stop the clock."""
        self._state = state
        self.stop_ticker()

    def stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    def tick(self) -> None:
        """Count one second; ignored unless playing."""
        if self._state == GameState.PLAYING:
            self._elapsed_seconds += 1

    def reveal(self, engine: RevealEngine, row: int, col: int) -> RevealResult:
        return engine.reveal(self._board, row, col)

    def chord_reveal(
        self, engine: RevealEngine, row: int, col: int
    ) -> RevealResult:
        return engine.chord_reveal(self._board, row, col)

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        result = toggle_flag(
            self._board, row, col, self._flag_count, self.mine_count
        )
        self._flag_count = result.flag_count
        return result

    def is_won(self) -> bool:
        return win.evaluate(self._board, self.mine_count)

    def __repr__(self) -> str:
        return (
            f"GameSession(state={self._state.name}, "
            f"flags={self._flag_count}/{self.mine_count}, "
            f"elapsed={self._elapsed_seconds}s)"
        )


# ============================================================================
# State Machine
# ============================================================================

class GameStateMachine:
    """
    Sequences a session through waiting, playing, won and lost.

    Every public method returns the current session. Actions on a won or
    lost game, on out-of-bounds cells and over the flag budget are
    silently ignored.
    """

    def __init__(
        self,
        config: GameConfig = EASY,
        rng: Optional[random.Random] = None,
        chord_requires_flag_match: bool = False,
        ticker_factory: TickerFactory = Ticker,
    ) -> None:
        """
        Initialize the state machine and deal the first board.

        Args:
            config: Board configuration.
            rng: Random source for mine placement (unseeded by default).
            chord_requires_flag_match: Use the strict chord policy.
            ticker_factory: Builds the session ticker from a callback.
        """
        self.generator = BoardGenerator(rng)
        self.engine = RevealEngine(chord_requires_flag_match)
        self.ticker_factory = ticker_factory
        self._config = config
        self._session = self._deal(config)

    @property
    def session(self) -> GameSession:
        return self._session

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(self, config: Optional[GameConfig] = None) -> GameSession:
        """Discard the current board and start over in WAITING."""
        self._session.stop_ticker()
        if config is not None:
            self._config = config
        self._session = self._deal(self._config)
        logger.info(
            "New game %dx%d with %d mines",
            self._config.rows, self._config.cols, self._config.mine_count,
        )
        return self._session

    def change_difficulty(self, level: Union[Difficulty, str]) -> GameSession:
        """Start a new game with one of the named presets."""
        try:
            difficulty = Difficulty(level)
        except ValueError:
            raise ConfigurationError(f"Unknown difficulty: {level!r}") from None
        return self.new_game(difficulty.config)

    def close(self) -> None:
        """Stop the ticker; call when the session is torn down."""
        self._session.stop_ticker()

    def _deal(self, config: GameConfig) -> GameSession:
        board = self.generator.generate(config.rows, config.cols, config.mine_count)
        return GameSession(board)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> GameSession:
        session = self._session
        if not self._begin_action(session, row, col):
            return session
        self._apply_reveal(session, session.reveal(self.engine, row, col))
        return session

    def chord_reveal(self, row: int, col: int) -> GameSession:
        session = self._session
        if session.state != GameState.PLAYING:
            return session
        self._apply_reveal(session, session.chord_reveal(self.engine, row, col))
        return session

    def toggle_flag(self, row: int, col: int) -> GameSession:
        session = self._session
        if not self._begin_action(session, row, col):
            return session

        result = session.toggle_flag(row, col)
        if result.placed and session.is_won():
            self._finish(session, GameState.WON)
        return session

    def tick(self) -> GameSession:
        """Advance the clock by one second while playing."""
        self._session.tick()
        return self._session

    # ========================================================================
    # Transitions (Low-level)
    # ========================================================================

    def _begin_action(self, session: GameSession, row: int, col: int) -> bool:
        """Gate a reveal/flag; the first in-bounds action starts play."""
        if session.state.is_terminal:
            return False
        if not session.in_bounds(row, col):
            return False
        if session.state == GameState.WAITING:
            # The ticker is bound to this session, so a late tick can
            # never land on a session dealt afterwards.
            session.start(self.ticker_factory(session.tick))
            logger.debug("Game started")
        return True

    def _apply_reveal(self, session: GameSession, result: RevealResult) -> None:
        if result.hit_mine:
            self._finish(session, GameState.LOST)

    def _finish(self, session: GameSession, state: GameState) -> None:
        session.finish(state)
        logger.info(
            "Game %s after %ds", state.name.lower(), session.elapsed_seconds
        )

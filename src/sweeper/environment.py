"""
Gymnasium environment wrapper for Minesweeper.

Exposes the state machine through a standard RL interface so agents
and scripted players can drive full games.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import GameConfig, EASY
from .session import GameState, GameStateMachine
from .ticker import ManualTicker


# ============================================================================
# Action Kinds
# ============================================================================

REVEAL = 0
FLAG = 1
CHORD = 2
ACTION_KINDS = (REVEAL, FLAG, CHORD)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * rows * cols. Action a is kind
        a // cells (0 reveal, 1 flag, 2 chord) on cell a % cells, where
        cell i is (i // cols, i % cols).

    Rewards:
        - +10 for winning the game
        - -10 for hitting a mine
        - +1 for an action that reveals cells
        - 0 for a flag toggle
        - -0.1 for an action that changes nothing or is out of range
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        chord_requires_flag_match: bool = False,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: easy preset).
            render_mode: How to render the environment.
            chord_requires_flag_match: Use the strict chord policy.
        """
        super().__init__()

        self.config = config or EASY
        self.render_mode = render_mode
        self.chord_requires_flag_match = chord_requires_flag_match
        self._cells = self.config.rows * self.config.cols

        self.game = self._make_game(random.Random())

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(ACTION_KINDS) * self._cells)

        self._steps = 0

    def _make_game(self, rng: random.Random) -> GameStateMachine:
        return GameStateMachine(
            self.config,
            rng=rng,
            chord_requires_flag_match=self.chord_requires_flag_match,
            ticker_factory=ManualTicker,
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**32)))
        self.game.close()
        self.game = self._make_game(rng)
        self._steps = 0

        return self.game.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded (kind, cell) action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        if self.action_space.contains(int(action)):
            reward = self._apply(*self.decode_action(action))
        else:
            reward = -0.1
        self.game.tick()

        observation = self.game.session.board.get_observation()
        terminated = self.game.session.state.is_terminal
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[int, int, int]:
        """Convert flat action index to (kind, row, col)."""
        kind, index = divmod(int(action), self._cells)
        row, col = divmod(index, self.config.cols)
        return kind, row, col

    def encode_action(self, kind: int, row: int, col: int) -> int:
        """Convert (kind, row, col) to flat action index."""
        return kind * self._cells + row * self.config.cols + col

    def _apply(self, kind: int, row: int, col: int) -> float:
        """
        Perform an action and score it.

        Args:
            kind: REVEAL, FLAG or CHORD.
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        before = self.game.session.board.get_observation()

        if kind == REVEAL:
            session = self.game.reveal(row, col)
        elif kind == FLAG:
            session = self.game.toggle_flag(row, col)
        elif kind == CHORD:
            session = self.game.chord_reveal(row, col)
        else:
            return -0.1

        if session.state == GameState.WON:
            return 10.0
        if session.state == GameState.LOST:
            return -10.0

        after = session.board.get_observation()
        if np.array_equal(before, after):
            return -0.1
        if kind == FLAG:
            return 0.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self.game.session
        return {
            "steps": self._steps,
            "revealed": session.board.revealed_count(),
            "flags": session.flag_count,
            "mines": session.mine_count,
            "elapsed": session.elapsed_seconds,
            "game_state": session.state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as ASCII string."""
        return render_text(self.game.session.board.get_observation())

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        session = self.game.session
        if session.state.is_terminal:
            return mask

        obs = session.board.get_observation().flatten()
        hidden = obs == -1
        flagged = obs == -2
        numbered = (obs >= 1) & (obs <= 8)

        mask[REVEAL * self._cells:(REVEAL + 1) * self._cells] = hidden
        can_flag = flagged.copy()
        if session.flag_count < session.mine_count:
            can_flag |= hidden
        mask[FLAG * self._cells:(FLAG + 1) * self._cells] = can_flag
        if session.state == GameState.PLAYING:
            mask[CHORD * self._cells:(CHORD + 1) * self._cells] = numbered
        return mask

    def close(self) -> None:
        self.game.close()
        super().close()


def render_text(obs: np.ndarray) -> str:
    """Render an observation array as rows of characters."""
    lines = []
    for row in range(obs.shape[0]):
        row_str = ""
        for col in range(obs.shape[1]):
            val = obs[row, col]
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)
    return "\n".join(lines)

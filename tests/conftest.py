"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, List, Sequence

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import (
    Board,
    BoardGenerator,
    Cell,
    GameConfig,
    GameStateMachine,
    ManualTicker,
)


# ============================================================================
# Deterministic Random Source
# ============================================================================

class ScriptedRandom:
    """Random stand-in that replays a fixed sequence of randrange results."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop: int) -> int:
        value = self.values[self.calls]
        self.calls += 1
        assert 0 <= value < stop
        return value


def layout_rng(layout: List[str]) -> ScriptedRandom:
    """Random source that places mines where the layout has '*'."""
    values = []
    for row, line in enumerate(layout):
        for col, char in enumerate(line):
            if char == "*":
                values.extend([row, col])
    return ScriptedRandom(values)


def board_from_layout(layout: List[str]) -> Board:
    """Generate a board whose mines match the layout exactly."""
    mines = sum(line.count("*") for line in layout)
    generator = BoardGenerator(layout_rng(layout))
    return generator.generate(len(layout), len(layout[0]), mines)


def machine_from_layout(
    layout: List[str],
    chord_requires_flag_match: bool = False,
    ticker_factory=ManualTicker,
) -> GameStateMachine:
    """State machine whose first board matches the layout exactly."""
    mines = sum(line.count("*") for line in layout)
    config = GameConfig(len(layout), len(layout[0]), mines)
    return GameStateMachine(
        config,
        rng=layout_rng(layout),
        chord_requires_flag_match=chord_requires_flag_match,
        ticker_factory=ticker_factory,
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def scripted_rng() -> Callable[[Sequence[int]], ScriptedRandom]:
    """Factory for random sources replaying fixed randrange results."""
    return ScriptedRandom


@pytest.fixture
def make_board() -> Callable[[List[str]], Board]:
    """Factory for boards laid out with '*' for mines and '.' for safe."""
    return board_from_layout


@pytest.fixture
def make_machine() -> Callable[..., GameStateMachine]:
    """Factory for state machines with a laid-out first board."""
    return machine_from_layout


@pytest.fixture
def empty_board() -> Board:
    """A 5x5 board with no mines for cascade testing."""
    return BoardGenerator().generate(5, 5, 0)


@pytest.fixture
def corner_board(make_board) -> Board:
    """A 2x2 board with a single mine in the top-left corner."""
    return make_board(["*.", ".."])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid board configuration."""
    return GameConfig(9, 9, 10)


@pytest.fixture
def machine() -> GameStateMachine:
    """Seeded easy game with a manual ticker."""
    import random
    return GameStateMachine(rng=random.Random(7), ticker_factory=ManualTicker)

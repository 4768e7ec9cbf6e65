"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import (
    GameConfig,
    GameSession,
    GridModel,
    RandomSource,
    SessionState,
)


# ============================================================================
# Test Doubles
# ============================================================================

class ScriptedRandomSource(RandomSource):
    """Returns a fixed sequence of values, recording each request."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values: List[int] = list(values)
        self.requests: List[int] = []

    def uniform(self, upper: int) -> int:
        self.requests.append(upper)
        value = self.values.pop(0)
        assert 0 <= value < upper
        return value


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def scripted_session(
    config: GameConfig, mine_indices: Iterable[int], clock=None
) -> GameSession:
    """Session whose first grid has mines exactly at mine_indices."""
    rng = ScriptedRandomSource(mine_indices)
    if clock is None:
        return GameSession(config, rng)
    return GameSession(config, rng, clock=clock)


# ============================================================================
# Layout Fixtures
# ============================================================================

# 9x9 layout with ten mines. The top-left cell (index 0) is safe but boxed
# in by mines, so it is the only safe cell a reveal of the blank centre
# does not reach.
#
#   3 * * 1 . . . 1 *
#   * * 3 1 . . . 1 1
#   2 2 1 . . . . . .
#   . . . . . . . . .   (rows 3-5 blank)
#   . . . . . . 1 2 2
#   . . . . . 1 3 * *
#   . . . . . 1 * * *
POCKET_MINES = [1, 2, 8, 9, 10, 70, 71, 78, 79, 80]
POCKET_INDEX = 0


@pytest.fixture
def pocket_mines() -> List[int]:
    """Mine indices for the 9x9 pocket layout."""
    return list(POCKET_MINES)


@pytest.fixture
def pocket_grid() -> GridModel:
    """9x9 grid with the pocket layout."""
    return GridModel.from_mines(9, 9, POCKET_MINES)


@pytest.fixture
def pocket_state(pocket_grid: GridModel) -> SessionState:
    """Starting state for the pocket layout."""
    return SessionState.new(pocket_grid)


@pytest.fixture
def small_grid() -> GridModel:
    """
    3x3 grid with a single mine in the top-left corner.

        * 1 .
        1 1 .
        . . .
    """
    return GridModel.from_mines(3, 3, [0])


@pytest.fixture
def clock() -> FakeClock:
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def pocket_session(clock: FakeClock) -> GameSession:
    """Easy session whose first grid uses the pocket layout."""
    return scripted_session(GameConfig(9, 9, 10), POCKET_MINES, clock)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def easy_config() -> GameConfig:
    """Easy difficulty configuration."""
    return GameConfig(9, 9, 10)


@pytest.fixture
def medium_config() -> GameConfig:
    """Medium difficulty configuration."""
    return GameConfig(16, 16, 40)


@pytest.fixture
def hard_config() -> GameConfig:
    """Hard difficulty configuration."""
    return GameConfig(30, 16, 99)
